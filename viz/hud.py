import pygame
import textwrap
from observable.bus import EventRegistry
from observable.monitor import EventRecorder
import config
from .colors import WHITE, GREY, AMBER, RED, GREEN


def draw_hud(screen, font, t: float, registry: EventRegistry, recorder: EventRecorder,
             last_error: str = None, faulty_attached: bool = False):
    """Side HUD panel showing controls, dispatch stats, and the recent fire log."""
    screen_w, screen_h = screen.get_size()
    panel_w = int(screen_w * 0.45)
    panel_x = screen_w - panel_w
    margin_x, margin_y = 12, 10
    line_spacing = 20

    # translucent panel
    hud_surface = pygame.Surface((panel_w, screen_h), pygame.SRCALPHA)
    hud_surface.fill((0, 0, 0, 180))
    y = margin_y

    stats = registry.stats
    header_lines = [
        f"t = {t:6.1f}s",
        f"Policy: {registry.error_policy.value}",
        f"Fires: {stats.fires}  Delivered: {stats.deliveries}  Failed: {stats.failures}",
        f"Faulty observer: {'ON' if faulty_attached else 'OFF'}",
        "",
        "Controls:",
        "[any key]  fire 'key'",
        "[click]    fire 'click'",
        "[F1]       Toggle faulty observer",
        "[F2]       Detach / attach recorder",
        "[ESC]      Quit",
        "",
        "Recent fires:",
    ]

    for line in header_lines:
        surf = font.render(line, True, WHITE)
        hud_surface.blit(surf, (margin_x, y))
        y += line_spacing

    # fire log, newest first
    max_text_width = panel_w - 2 * margin_x
    wrap_chars = max(10, max_text_width // 9)
    recent = list(recorder.history)[-config.HUD_LINES:]

    for name, payload in reversed(recent):
        if y > screen_h - 2 * line_spacing:
            break
        color = GREEN if name == "key" else AMBER
        for wline in textwrap.wrap(f"{name}: {payload!r}", width=wrap_chars):
            surf = font.render(wline, True, color)
            hud_surface.blit(surf, (margin_x, y))
            y += line_spacing

    if last_error:
        surf = font.render(last_error[:wrap_chars], True, RED)
        hud_surface.blit(surf, (margin_x, screen_h - 2 * line_spacing))
    elif not recent:
        surf = font.render("(nothing fired yet)", True, GREY)
        hud_surface.blit(surf, (margin_x, screen_h - 2 * line_spacing))

    # border line separating channel view and HUD
    pygame.draw.line(hud_surface, (120, 120, 120), (0, 0), (0, screen_h), 1)
    screen.blit(hud_surface, (panel_x, 0))
