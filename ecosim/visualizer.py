"""
Pygame визуализация экосистемы.
Левая часть: сетка, растения квадратами, животные кругами поверх.
Правая часть: численность видов и графики популяций.
"""

import time
from collections import deque

import pygame

from ecosim.config import SimulationConfig
from ecosim.species import (EAGLE, FOX, GRASSHOPPER, PLANT, SCORPION,
                            SEEDING_ORDER, SQUIRREL)
from ecosim.stats import FieldStats
from ecosim.world import Simulator

# ── Цветовая палитра ──────────────────────────────────────────────────────────

BG           = (10, 11, 16)
GRID_BG      = (14, 16, 22)
GRID_LINE    = (22, 26, 36)
PANEL_BG     = (16, 18, 28)
PANEL_EDGE   = (32, 38, 60)

C_TEXT       = (180, 185, 210)
C_SUBTEXT    = ( 90,  96, 130)
C_ACCENT     = (100, 130, 255)

SPECIES_COLORS = {
    SQUIRREL:    (220,  60,  60),   # красный
    FOX:         ( 70, 110, 230),   # синий
    SCORPION:    (240, 150, 190),   # розовый
    GRASSHOPPER: ( 90, 210,  90),   # зелёный
    EAGLE:       (240, 160,  40),   # оранжевый
    PLANT:       ( 40,  90,  50),
}

PHASE_COLORS = {
    "DAY":   (240, 220, 100),
    "NIGHT": ( 60,  80, 160),
}

HISTORY_LEN = 200


# ── Утилиты ───────────────────────────────────────────────────────────────────

def lerp_color(a, b, t):
    t = max(0.0, min(1.0, t))
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


def draw_text(surf, font, text, x, y, color=C_TEXT):
    surf.blit(font.render(text, True, color), (x, y))


class PygameView:
    """Наблюдатель: копит историю численности, рисует по запросу."""

    def __init__(self, kinds=None):
        self.kinds = list(kinds) if kinds is not None else list(SEEDING_ORDER)
        self.stats = FieldStats()
        self.history = {k: deque([0] * HISTORY_LEN, maxlen=HISTORY_LEN) for k in self.kinds}
        self.last_counts = {k: 0 for k in self.kinds}
        self.step = 0

    def report(self, step, field):
        counts = self.stats.counts(field)
        self.step = step
        for k in self.kinds:
            self.last_counts[k] = counts.get(k, 0)
            self.history[k].append(self.last_counts[k])

    def is_viable(self, field):
        return self.stats.is_viable(field)


# ── Сетка ─────────────────────────────────────────────────────────────────────

def render_grid(surf, sim, gx, gy, gw, gh):
    rows, cols = sim.field.depth, sim.field.width
    cw = gw / cols
    ch = gh / rows

    pygame.draw.rect(surf, GRID_BG, (gx, gy, gw, gh), border_radius=8)

    for loc in sim.field.locations():
        animal = sim.field.get_object_at(loc)
        plant  = sim.plant_field.get_object_at(loc)
        cx = gx + loc.col * cw
        cy = gy + loc.row * ch

        if plant is not None:
            t = plant.size / plant.max_growth
            color = lerp_color(SPECIES_COLORS[PLANT], BG, t)
            pygame.draw.rect(surf, color, (int(cx), int(cy), max(1, int(cw)), max(1, int(ch))))

        if animal is not None:
            color  = SPECIES_COLORS.get(animal.kind, C_TEXT)
            center = (int(cx + cw / 2), int(cy + ch / 2))
            radius = max(1, int(min(cw, ch) * 0.45))
            pygame.draw.circle(surf, color, center, radius)

    # линии сетки только когда клетки достаточно крупные
    if cw >= 6:
        for r in range(rows + 1):
            y = int(gy + r * ch)
            pygame.draw.line(surf, GRID_LINE, (gx, y), (gx + gw, y))
        for c in range(cols + 1):
            x = int(gx + c * cw)
            pygame.draw.line(surf, GRID_LINE, (x, gy), (x, gy + gh))

    pygame.draw.rect(surf, PANEL_EDGE, (gx, gy, gw, gh), 1, border_radius=8)


# ── График ────────────────────────────────────────────────────────────────────

def render_chart(surf, font_xs, histories, colors, x, y, w, h, title):
    pygame.draw.rect(surf, PANEL_BG, (x, y, w, h), border_radius=6)
    pygame.draw.rect(surf, PANEL_EDGE, (x, y, w, h), 1, border_radius=6)

    draw_text(surf, font_xs, title, x + 10, y + 6, C_SUBTEXT)

    px, py = x + 32, y + 22
    pw, ph = w - 40, h - 30

    all_vals = [v for s in histories for v in s]
    max_val  = max(all_vals) if all_vals and max(all_vals) > 0 else 1

    for i in range(5):
        ly = py + ph - int(ph * i / 4)
        pygame.draw.line(surf, GRID_LINE, (px, ly), (px + pw, ly))
        draw_text(surf, font_xs, str(int(max_val * i / 4)), x + 2, ly - 6, C_SUBTEXT)

    for series, color in zip(histories, colors):
        pts = [(px + int(i * pw / (HISTORY_LEN - 1)), py + ph - int(v / max_val * ph))
               for i, v in enumerate(series)]
        if len(pts) >= 2:
            pygame.draw.lines(surf, color, False, pts, 2)


# ── Боковая панель ────────────────────────────────────────────────────────────

def render_panel(surf, sim, view, fonts, px, py, pw, ph, fps):
    font, font_sm, font_xs = fonts

    pygame.draw.rect(surf, PANEL_BG, (px, py, pw, ph), border_radius=8)
    pygame.draw.rect(surf, PANEL_EDGE, (px, py, pw, ph), 1, border_radius=8)

    phase_name = sim.clock.time.name
    phase_col  = PHASE_COLORS.get(phase_name, C_ACCENT)

    cy = py + 14
    pygame.draw.rect(surf, phase_col, (px + 8, cy, 3, 28), border_radius=2)
    draw_text(surf, font, {"DAY": "День", "NIGHT": "Ночь"}[phase_name], px + 18, cy + 5, phase_col)
    cy += 38

    draw_text(surf, font_sm, f"Шаг: {view.step}", px + 12, cy, C_SUBTEXT)
    draw_text(surf, font_sm, f"FPS: {fps:.0f}", px + pw - 58, cy, C_SUBTEXT)
    cy += 22

    # ── Полоски популяций ─────────────────────────────────────────────────────
    entries = [(k, view.last_counts[k], SPECIES_COLORS[k]) for k in view.kinds]
    entries.append((PLANT, len(sim.plants), SPECIES_COLORS[PLANT]))
    max_count = max((e[1] for e in entries), default=1) or 1

    for label, count, color in entries:
        draw_text(surf, font_sm, label, px + 10, cy + 2, color)
        bx = px + 110
        bw = pw - 160
        pygame.draw.rect(surf, GRID_LINE, (bx, cy + 5, bw, 10), border_radius=4)
        fill = int(bw * count / max_count)
        if fill > 0:
            pygame.draw.rect(surf, color, (bx, cy + 5, fill, 10), border_radius=4)
        draw_text(surf, font_sm, str(count), px + pw - 44, cy + 2, C_TEXT)
        cy += 21

    cy += 8
    chart_h = min(160, (py + ph) - cy - 30)
    if chart_h > 40:
        render_chart(surf, font_xs,
                     [list(view.history[k]) for k in view.kinds],
                     [SPECIES_COLORS[k] for k in view.kinds],
                     px + 6, cy, pw - 12, chart_h, "Животные")

    draw_text(surf, font_xs, "SPACE: пауза/продолжить    ESC: выход",
              px + 10, py + ph - 18, C_SUBTEXT)


# ── Запуск ────────────────────────────────────────────────────────────────────

def run(config=None, steps=500, delay=0.05, cell=4):
    config = config or SimulationConfig()
    view = PygameView(kinds=[k for k in SEEDING_ORDER if k in config.species])
    sim = Simulator(config, observer=view)

    pygame.init()
    pygame.display.set_caption("Predator-prey simulation")

    PANEL = 300
    PAD   = 12

    grid_w = config.width * cell
    grid_h = config.depth * cell
    win_w  = grid_w + PANEL + PAD * 3
    win_h  = max(grid_h + PAD * 2, 480)

    screen   = pygame.display.set_mode((win_w, win_h))
    pg_clock = pygame.time.Clock()

    font    = pygame.font.SysFont(None, 20, bold=True)
    font_sm = pygame.font.SysFont(None, 17)
    font_xs = pygame.font.SysFont(None, 14)

    done      = 0
    last_tick = time.time()
    paused    = False

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                if event.key == pygame.K_SPACE:
                    paused = not paused

        now = time.time()
        active = done < steps and view.is_viable(sim.field)
        if not paused and active and now - last_tick >= delay:
            sim.step()
            done += 1
            last_tick = now

        screen.fill(BG)
        render_grid(screen, sim, PAD, PAD, grid_w, grid_h)
        render_panel(screen, sim, view, (font, font_sm, font_xs),
                     PAD + grid_w + PAD, PAD, PANEL, win_h - PAD * 2,
                     pg_clock.get_fps())

        if paused:
            ps = font.render("ПАУЗА", True, C_ACCENT)
            screen.blit(ps, (PAD + grid_w // 2 - ps.get_width() // 2,
                             PAD + grid_h // 2 - ps.get_height() // 2))

        pygame.display.flip()
        pg_clock.tick(60)

    pygame.quit()
    return sim
