"""Settings for satellite orbit propagation."""

__all__ = ["settings"]