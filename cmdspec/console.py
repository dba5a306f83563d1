# Cmdspec CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for cmdspec output."""
from rich.console import Console

console = Console(highlight=False)
