"""NBA record API service."""
