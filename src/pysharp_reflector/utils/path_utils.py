"""Path utilities for cross-platform file operations."""

import re
import string


def sanitize_for_filesystem(name: str, replacement: str = "_") -> str:
    """Sanitize a string to be safe for use as a filename."""
    if not name:
        return "unnamed"

    valid_chars = set(string.ascii_letters + string.digits + "_-.")
    sanitized = "".join(c if c in valid_chars else replacement for c in name)

    # Collapse multiple replacement characters
    if replacement in sanitized:
        pattern = re.escape(replacement) + "+"
        sanitized = re.sub(pattern, replacement, sanitized)

    sanitized = sanitized.strip(replacement)

    if not sanitized:
        sanitized = "unnamed"

    # Truncate if too long (leaving room for the suffix)
    if len(sanitized) > 200:
        sanitized = sanitized[:200].rstrip(replacement)

    return sanitized


def create_output_filename(stem: str, suffix: str = ".params.cs") -> str:
    """Create a safe output filename for a signature file stem."""
    return f"{sanitize_for_filesystem(stem)}{suffix}"
