"""A simulated text-mode hobby operating system: VGA screen, descriptor tables, in-memory VFS, timer, keyboard and shells."""

__version__ = "1.0.1"