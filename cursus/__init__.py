"""Push-swap stack sorting, a two-command pipeline runner and string helpers."""

__version__ = "0.1.0"

__all__ = ["libft", "stack", "args", "sorting", "pipex"]