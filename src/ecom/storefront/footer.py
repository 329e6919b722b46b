"""Storefront footer."""

COPYRIGHT = "© 2023 ALL GOOD's Inc , All rights reserved."


def render_footer(width: int = 80) -> str:
    """Top border followed by the centred copyright line."""
    return "\n".join(["-" * width, "", COPYRIGHT.center(width), ""])
