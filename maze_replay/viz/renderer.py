import logging
import pygame
from maze_replay.core.grid import Grid
from maze_replay.viz.playback import SnapshotPlayer
from maze_replay.viz.recorder import VideoRecorder

logger = logging.getLogger(__name__)


class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_VISITED = (60, 100, 160)# Blue tint
    COLOR_MARKED = (40, 120, 90)# Prim's region
    COLOR_HIGHLIGHT = (220, 50, 50)

    def __init__(self, player: SnapshotPlayer, width=1280, height=720, fps=60, ticks_per_frame=1, record=False):
        self.player = player
        self.screen_width = width
        self.screen_height = height
        self.fps = fps
        self.ticks_per_frame = ticks_per_frame

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.recorder = VideoRecorder(active=record, fps=fps)

        self.font = None
        self.running = True
        self.paused = False
        self.clock = None
        self.surface = None

    @property
    def grid(self) -> Grid:
        return self.player.current.grid

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        self.cell_size = min(available_w / self.grid.width, available_h / self.grid.height)

        # Center
        total_maze_w = self.grid.width * self.cell_size
        total_maze_h = self.grid.height * self.cell_size

        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def init_window(self):
        pygame.init()
        title = self.player.title or "Maze"
        pygame.display.set_caption(f"{title} - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        self.fit_to_screen()

    def world_to_screen(self, wx, wy):
        sx = wx * self.cell_size + self.offset_x
        sy = wy * self.cell_size + self.offset_y
        return sx, sy

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key == pygame.K_RIGHT:
                    self.player.tick()
                elif event.key == pygame.K_r:
                    self.player.reset()

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()

                # World coord before zoom
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed

                self.cell_size = max(1.0, min(200.0, self.cell_size))

                # Keep mouse at same world coord
                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]: # Left or Right drag
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def cell_color(self, x: int, y: int):
        snapshot = self.player.current
        if snapshot.is_highlighted(x, y):
            return self.COLOR_HIGHLIGHT
        cell = snapshot.grid.cells[y * snapshot.grid.width + x]
        if cell & Grid.VISITED:
            return self.COLOR_VISITED
        if cell & Grid.MARKED:
            return self.COLOR_MARKED
        return None

    def draw_grid(self):
        grid = self.grid
        self.surface.fill(self.COLOR_BG)
        size = int(self.cell_size) + 1

        # 1. Cell backgrounds
        for y in range(grid.height):
            for x in range(grid.width):
                color = self.cell_color(x, y)
                if color is None:
                    continue
                px, py = self.world_to_screen(x, y)
                pygame.draw.rect(self.surface, color, (int(px), int(py), size, size))

        # 2. Walls
        for y in range(grid.height):
            for x in range(grid.width):
                cell = grid.cells[y * grid.width + x]
                px, py = self.world_to_screen(x, y)
                px, py = int(px), int(py)

                if cell & Grid.SOUTH:
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px, py + size), (px + size, py + size), 1)
                if cell & Grid.EAST:
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px + size, py), (px + size, py + size), 1)

                if y == 0 and (cell & Grid.NORTH):
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px + size, py), 1)
                if x == 0 and (cell & Grid.WEST):
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px, py + size), 1)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        status = "Paused" if self.paused else ("Done" if self.player.finished else "Running")
        info = [
            self.player.title or "",
            f"Step: {self.player.index + 1}/{len(self.player)}",
            f"Size: {self.grid.width}x{self.grid.height}",
            f"FPS: {fps}",
            f"Status: {status}",
            "REC" if self.recorder.active else "",
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        logger.debug(f"Replaying {len(self.player)} snapshots at {self.fps} fps")

        while self.running:
            self.handle_input()

            if not self.paused:
                self.player.tick(self.ticks_per_frame)

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.surface)
                # A recording ends with the animation
                if self.player.finished:
                    self.running = False

            self.clock.tick(self.fps)

        self.recorder.stop()
        pygame.quit()
