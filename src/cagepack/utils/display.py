"""
User-friendly display utilities for cagepack.
"""

import time
from typing import Any, Dict
from datetime import datetime


class StatusDisplay:
    """Handles status display for different operations."""

    @staticmethod
    def print_section(title: str, width: int = 60):
        """Print a section header."""
        print(f"\n📋 {title}")
        print("-" * width)

    @staticmethod
    def print_config(config_dict: Dict[str, Any], title: str = "Configuration"):
        """Print configuration in a nice format."""
        StatusDisplay.print_section(title)
        for key, value in config_dict.items():
            print(f"  {key:<20} : {value}")

    @staticmethod
    def print_status(message: str, status: str = "info"):
        """Print a status message with appropriate emoji."""
        icons = {
            "info": "ℹ️",
            "success": "✅",
            "warning": "⚠️",
            "error": "❌",
            "processing": "🔄"
        }
        icon = icons.get(status, "ℹ️")
        timestamp = datetime.now().strftime("%H:%M:%S")
        print(f"{icon} [{timestamp}] {message}")

    @staticmethod
    def print_results(results: Dict[str, Any], title: str = "Results"):
        """Print results in a nice format."""
        StatusDisplay.print_section(title)
        for key, value in results.items():
            if isinstance(value, bool):
                icon = "✅" if value else "❌"
                print(f"  {key:<20} : {icon} {value}")
            elif isinstance(value, float):
                print(f"  {key:<20} : {value:.3f}")
            else:
                print(f"  {key:<20} : {value}")


class LiveLogger:
    """Verbose-gated status lines for a search run."""

    def __init__(self, verbose: bool = True):
        self.verbose = verbose
        self.started_at = {}

    def log_phase_start(self, phase: str):
        if self.verbose:
            StatusDisplay.print_status(f"Starting {phase}", "processing")
        self.started_at[phase] = time.time()

    def log_phase_end(self, phase: str, result: str, success: bool = True):
        if self.verbose:
            elapsed = time.time() - self.started_at.get(phase, time.time())
            status = "success" if success else "error"
            StatusDisplay.print_status(f"{phase} finished: {result} ({elapsed:.2f}s)", status)

    def log_config(self, config_dict: Dict[str, Any]):
        if self.verbose:
            StatusDisplay.print_config(config_dict)

    def log_stats(self, stats: Dict[str, Any]):
        if self.verbose:
            StatusDisplay.print_results(stats, title="Search statistics")

    def log_info(self, message: str):
        """Log an info message."""
        if self.verbose:
            StatusDisplay.print_status(message, "info")

    def log_warning(self, message: str):
        """Log a warning message."""
        if self.verbose:
            StatusDisplay.print_status(message, "warning")
