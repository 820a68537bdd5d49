import pygame
from maze_walker.core.grid import Grid

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_BLOCKED = (200, 200, 200)
    COLOR_OPEN = (40, 40, 40)
    COLOR_START = (60, 100, 160)# Blue tint
    COLOR_SHORTEST = (255, 215, 0)# Gold
    COLOR_LONGEST = (200, 60, 60)# Red

    def __init__(self, grid: Grid, ranking=None, width=1280, height=720):
        self.grid = grid
        self.ranking = ranking
        self.screen_width = width
        self.screen_height = height

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        zoom_x = available_w / self.grid.cols
        zoom_y = available_h / self.grid.rows

        # Taking minimum zoom to fit both dimensions
        self.cell_size = max(1.0, min(zoom_x, zoom_y))

        # Center
        total_maze_w = self.grid.cols * self.cell_size
        total_maze_h = self.grid.rows * self.cell_size

        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Walker - {self.grid.rows}x{self.grid.cols}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        # Initial fit
        self.fit_to_screen()

    def world_to_screen(self, col, row):
        sx = col * self.cell_size + self.offset_x
        sy = row * self.cell_size + self.offset_y
        return sx, sy

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

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

                # Clamp zoom
                self.cell_size = max(1.0, min(200.0, self.cell_size))

                # Adjust offset to keep mouse at same world coord
                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]: # Left or Right drag
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def draw_path(self, path, color):
        size = int(self.cell_size) + 1
        # Inset so the cell colour underneath stays visible at the edges
        inset = int(self.cell_size * 0.2)
        for (row, col) in path:
            sx, sy = self.world_to_screen(col, row)
            pygame.draw.rect(self.surface, color,
                             (int(sx) + inset, int(sy) + inset, size - 2 * inset, size - 2 * inset))

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        size = int(self.cell_size) + 1

        # 1. Cells
        for row in range(self.grid.rows):
            for col in range(self.grid.cols):
                cell = self.grid.cells[row * self.grid.cols + col]

                if cell == Grid.BLOCKED:
                    color = self.COLOR_BLOCKED
                elif cell == Grid.START:
                    color = self.COLOR_START
                else:
                    color = self.COLOR_OPEN

                px, py = self.world_to_screen(col, row)
                pygame.draw.rect(self.surface, color, (int(px), int(py), size, size))

        # 2. Paths - shortest drawn last so it wins where they overlap
        if self.ranking is not None:
            self.draw_path(self.ranking.longest, self.COLOR_LONGEST)
            self.draw_path(self.ranking.shortest, self.COLOR_SHORTEST)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.rows}x{self.grid.cols}",
            f"Zoom: {self.cell_size:.2f}",
        ]
        if self.ranking is not None:
            info.append(f"Paths: {self.ranking.count}")
            info.append(f"Shortest: {len(self.ranking.shortest)}")
            info.append(f"Longest: {len(self.ranking.longest)}")

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def save_snapshot(self, filepath: str):
        """Renders the maze off-screen and writes it as an image file."""
        self.surface = pygame.Surface((self.screen_width, self.screen_height))
        self.fit_to_screen()
        self.draw_grid()
        pygame.image.save(self.surface, filepath)

    def run_loop(self):
        while self.running:
            self.handle_input()

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()

            self.clock.tick(60)

        pygame.quit()
