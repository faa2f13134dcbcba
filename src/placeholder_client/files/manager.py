"""
File Manager Module

Manages the output directory and writes the derived JSON artifacts.
Handles directory creation, file path generation, and writing.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from ..api.codec import JsonCodec
from ..api.errors import ClientError, ErrorKind
from ..api.models import Comment
from ..config import config


logger = logging.getLogger(__name__)


class FileManager:
    """
    Manager for writing comment files to the output directory.
    """

    def __init__(
        self,
        output_dir: Optional[Path] = None,
        codec: Optional[JsonCodec] = None
    ):
        """
        Initialize the file manager.

        Args:
            output_dir: Directory for output files (uses config default if None).
            codec: Codec used to pretty-print the written JSON.
        """
        self.output_dir = Path(output_dir) if output_dir is not None else config.file.output_directory
        self.codec = codec or JsonCodec(indent=config.file.json_indent)
        logger.debug(f"FileManager initialized (output: {self.output_dir})")

    def ensure_output_directory(self) -> Path:
        """
        Ensure the output directory exists.

        Creates the directory if it doesn't exist.

        Returns:
            Path to the output directory.
        """
        if not self.output_dir.exists():
            logger.info(f"Creating output directory: {self.output_dir}")
            self.output_dir.mkdir(parents=True, exist_ok=True)

        return self.output_dir

    def get_comments_path(self, user_id: str, post_id: int) -> Path:
        """
        Get the file path for the comments of a user's post.

        Args:
            user_id: The user ID as given by the caller.
            post_id: The post ID.

        Returns:
            Full path to the file.

        Raises:
            ClientError: FILE_WRITE if the user ID would leave the output
                directory.
        """
        user_id = str(user_id)
        if "/" in user_id or "\\" in user_id or user_id in ("", ".", ".."):
            raise ClientError(ErrorKind.FILE_WRITE, f"Invalid user ID for a file name: {user_id!r}")
        return self.output_dir / config.file.get_comments_filename(user_id, post_id)

    def write_comments(
        self,
        user_id: str,
        post_id: int,
        comments: Sequence[Comment]
    ) -> Path:
        """
        Write comments as pretty-printed JSON, overwriting any existing file.

        Returns:
            Path of the written file.

        Raises:
            ClientError: ENCODING if the comments cannot be encoded,
                FILE_WRITE if the file cannot be written.
        """
        content = self.codec.encode_pretty(list(comments))
        file_path = self.get_comments_path(user_id, post_id)

        try:
            self.ensure_output_directory()
            file_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ClientError(ErrorKind.FILE_WRITE, f"Cannot write {file_path}: {e}", cause=e) from e

        logger.info(f"Wrote {len(comments)} comment(s) to {file_path}")
        return file_path

    def list_saved_files(self) -> List[Path]:
        """
        List all saved comment files.

        Returns:
            List of file paths, sorted by name.
        """
        if not self.output_dir.exists():
            return []

        return sorted(self.output_dir.glob("user-*-post-*-comments.json"), key=lambda f: f.name)
