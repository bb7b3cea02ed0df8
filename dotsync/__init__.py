"""dotsync — copy a fixed set of dotfiles between a repository and the home directory."""

__version__ = "0.1.0"
