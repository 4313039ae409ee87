import logging

import pygame

log = logging.getLogger(__name__)

COLOR_SCHEMES = [
    {"name": "Klein", "colors": ["#344CB9", "#1B288A", "#0F185B", "#D7C99A", "#F2E4C7"]},
    {"name": "Haru", "colors": ["#F2DADF", "#E9D6F9", "#EACEE9", "#F2DADF", "#FFEFE7"]},
    {"name": "SpringPastels", "colors": ["#FD7F6F", "#7EB0D5", "#B2E061", "#BD7EBE", "#FFB55A", "#FFEE65"]},
    {"name": "MidnightDream", "colors": ["#030213", "#13115A", "#8587A8", "#30FF9C", "#1B1C34"]},
    {"name": "BlueNightclub", "colors": ["#4500FE", "#581AFE", "#6A33FE", "#7D4DFE", "#8F66FE"]},
]


def scheme_index(name):
    """Index of a color scheme by case-insensitive name."""
    for i, scheme in enumerate(COLOR_SCHEMES):
        if scheme["name"].lower() == str(name).lower():
            return i
    names = ", ".join(s["name"] for s in COLOR_SCHEMES)
    raise ValueError(f"unknown palette {name!r}; choose from {names}")


def load_game_fonts():
    """Return (big, medium, small) default fonts."""
    if not pygame.font.get_init():
        pygame.font.init()

    try:
        big = pygame.font.Font(None, 48)
        medium = pygame.font.Font(None, 32)
        small = pygame.font.Font(None, 20)
        return big, medium, small
    except pygame.error as e:
        log.warning("Font load failed: %s", e)
        f = pygame.font.SysFont(None, 24)
        return f, f, f
