from blog_theme.adapters.clock import SystemClock
from blog_theme.adapters.theme_helper import ThemeHelper, coerce_datetime, format_moment

__all__ = ["SystemClock", "ThemeHelper", "coerce_datetime", "format_moment"]
