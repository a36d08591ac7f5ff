"""
Configuration constants for the Post Browser.

This module centralizes the fixed parameters of the application so the
API endpoint and logging setup live in one place.
"""

from pathlib import Path
from dataclasses import dataclass, field


@dataclass
class APIConfig:
    """API configuration settings."""
    base_url: str = "https://jsonplaceholder.typicode.com/"
    posts_endpoint: str = "posts"
    timeout_seconds: float = 10.0

    @property
    def posts_url(self) -> str:
        """Full URL of the posts resource."""
        return f"{self.base_url}{self.posts_endpoint}"


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "post_browser.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    api: APIConfig = field(default_factory=APIConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
