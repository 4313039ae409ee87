import pygame

COL_BG = (255, 255, 255)
COL_INK = (0, 0, 0)
COL_LINE = (200, 200, 200)
COL_HINT = (90, 90, 100)
COL_DIM = (255, 255, 255, 150)

DASH = 12


def draw_court(surface, match):
    """Center line, scores, paddles and the square ball."""
    w, h = match.court.width, match.court.height
    cx = w // 2
    for y in range(0, h, DASH * 2):
        pygame.draw.line(surface, COL_LINE, (cx, y), (cx, min(h, y + DASH)), 2)

    for paddle in (match.left_paddle, match.right_paddle):
        pygame.draw.rect(surface, COL_INK, pygame.Rect(*map(round, paddle.rect())))

    ball = match.ball
    pygame.draw.rect(surface, COL_INK, (round(ball.x), round(ball.y), ball.size, ball.size))


def draw_scores(surface, font, match):
    w = match.court.width
    for value, x in ((match.left_score, w // 4), (match.right_score, 3 * w // 4)):
        txt = font.render(str(value), True, COL_INK)
        surface.blit(txt, txt.get_rect(center=(x, 50)))


def draw_hud(surface, font, lines):
    """Small hint lines along the bottom edge."""
    w, h = surface.get_size()
    for i, line in enumerate(reversed(lines)):
        s = font.render(line, True, COL_HINT)
        surface.blit(s, s.get_rect(center=(w // 2, h - 14 - 18 * i)))


def draw_game_over(surface, fonts, winner):
    big, small = fonts
    w, h = surface.get_size()
    dim = pygame.Surface((w, h), pygame.SRCALPHA)
    dim.fill(COL_DIM)
    surface.blit(dim, (0, 0))
    title = "Left player wins!" if winner == "left" else "Right player wins!"
    t = big.render(title, True, COL_INK)
    surface.blit(t, t.get_rect(center=(w // 2, h // 2)))
    for i, line in enumerate(("Press SPACE to play again", "Press B to change background")):
        s = small.render(line, True, COL_INK)
        surface.blit(s, s.get_rect(center=(w // 2, h // 2 + 50 + 20 * i)))


def render(surface, fonts, context, hud_lines=()):
    """Paint one frame. A missing surface is skipped."""
    if surface is None:
        return False
    big, medium, small = fonts
    match = context.match
    surface.fill(COL_BG)
    context.background.draw(surface)
    draw_court(surface, match)
    draw_scores(surface, big, match)
    if hud_lines:
        draw_hud(surface, small, list(hud_lines))
    if match.check_win():
        draw_game_over(surface, (big, medium), match.winner())
    return True
