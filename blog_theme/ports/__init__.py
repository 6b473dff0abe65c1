from blog_theme.ports.clock import ClockPort

__all__ = ["ClockPort"]
