"""
Configuration constants for the JSONPlaceholder client.

This module centralizes all configurable parameters so the client,
the file manager and the command line read the same defaults.
"""

from pathlib import Path
from dataclasses import dataclass, field


@dataclass
class APIConfig:
    """API configuration settings."""
    base_url: str = "https://jsonplaceholder.typicode.com"
    users_endpoint: str = "/users"
    posts_endpoint: str = "/posts"
    comments_endpoint: str = "/comments"
    todos_endpoint: str = "/todos"
    timeout_seconds: float = 10.0
    content_type: str = "application/json; charset=utf-8"

    @property
    def headers(self) -> dict:
        """Headers sent with every request."""
        return {"content-type": self.content_type}


@dataclass
class FileConfig:
    """File output configuration."""
    output_folder_name: str = "Files"
    comments_filename_template: str = "user-{user_id}-post-{post_id}-comments.json"
    json_indent: int = 4

    @property
    def output_directory(self) -> Path:
        """Output directory, relative to the working directory."""
        return Path(self.output_folder_name)

    def get_comments_filename(self, user_id: str, post_id: int) -> str:
        """Generate the file name for a user's last-post comments."""
        return self.comments_filename_template.format(user_id=user_id, post_id=post_id)


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "placeholder_client.log"
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
    file: FileConfig = field(default_factory=FileConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
