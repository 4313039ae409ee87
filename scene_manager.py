import logging

import pygame

log = logging.getLogger(__name__)


class Scene:
    """Base scene with no-op event/update/draw hooks."""

    def __init__(self, manager):
        self.manager = manager

    def handle_event(self, event):
        pass

    def update(self, dt):
        pass

    def draw(self):
        pass


class SceneManager:
    """Controls scene stack and main loop."""

    def __init__(self, first_scene_class, size=(800, 500), fps=60, caption="Pong", **scene_kwargs):
        pygame.init()
        self.screen = pygame.display.set_mode(size)
        self.size = self.screen.get_size()
        pygame.display.set_caption(caption)
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.running = True
        self.scenes = []

        # Initialize first scene
        if callable(first_scene_class):
            first_scene = first_scene_class(self, **scene_kwargs)
            self.scenes.append(first_scene)
        else:
            raise ValueError("First scene must be a class reference.")

    def push(self, scene):
        self.scenes.append(scene)

    def pop(self):
        if self.scenes:
            self.scenes.pop()
        if not self.scenes:
            self.running = False

    def step(self, dt):
        """One frame: events, update, draw. Scene errors are logged, not fatal."""
        if not self.scenes:
            self.running = False
            return
        current = self.scenes[-1]

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                break
            try:
                current.handle_event(event)
            except Exception:
                log.exception("Scene %s failed handling %s",
                              type(current).__name__, pygame.event.event_name(event.type))

        try:
            current.update(dt)
            current.draw()
        except Exception:
            log.exception("Scene %s failed this frame", type(current).__name__)

        pygame.display.flip()

    def run(self):
        """Main loop."""
        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            self.step(dt)
        pygame.quit()
