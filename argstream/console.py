# Argstream CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for Argstream CLI applications."""
from rich.console import Console

console = Console()
error_console = Console(stderr=True)
