from arch_mcp.main import main

main()
