"""Line/fragment processing."""

from .processor import FragmentProcessor, fragment_from_line, split_lines

__all__ = ["FragmentProcessor", "fragment_from_line", "split_lines"]
