import pygame
from observable.bus import EventRegistry
from observable.handles import describe
import config
from .colors import WHITE, GREY, CYAN


def draw_channel(screen, font, x: int, y: int, name: str, observers) -> int:
    """Draw one channel box; returns the y below it."""
    height = 28 + 18 * max(1, len(observers))
    width = int(config.SCREEN_W * 0.5)
    pygame.draw.rect(screen, CYAN, (x, y, width, height), 1)
    screen.blit(font.render(f"{name}  ({len(observers)})", True, CYAN), (x + 8, y + 4))

    if not observers:
        screen.blit(font.render("(empty)", True, GREY), (x + 16, y + 26))
    for i, obs in enumerate(observers):
        screen.blit(font.render(f"{i + 1}. {describe(obs)}", True, WHITE), (x + 16, y + 26 + 18 * i))
    return y + height + 10


def render(screen, font, time_s, registry: EventRegistry):
    screen.fill(config.BG_COLOR)
    x, y = 20, 20
    for name, observers in registry.channels.items():
        if y > config.SCREEN_H - 40:
            break
        y = draw_channel(screen, font, x, y, name, observers)
