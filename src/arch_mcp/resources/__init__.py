"""Documentation texts served by the architecture tools."""
