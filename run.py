import pygame, sys, argparse, logging, random
import config
from observable.bus import EventRegistry
from observable.subject import Observable
from observable.monitor import EventRecorder
from viz.pygame_app import render
from viz.hud import draw_hud


class InputPanel:
    """Demo owner: turns raw input into 'key' / 'click' events."""

    def __init__(self, error_policy=None):
        self.observable = Observable(EventRegistry(error_policy))
        self.presses = 0

    @property
    def events(self):
        return self.observable.events

    def press(self, key_name: str):
        self.presses += 1
        self.observable.fire_event("key", key_name)
        return self

    def click(self, pos):
        self.observable.fire_event("click", {"x": pos[0], "y": pos[1]})
        return self


def faulty_observer(payload):
    raise RuntimeError(f"faulty observer rejected {payload!r}")


def toggle(panel: InputPanel, event: str, observer, attached: bool) -> bool:
    if attached:
        panel.observable.remove_observer(event, observer)
    else:
        panel.observable.add_observer(event, observer)
    return not attached


def run_headless(panel: InputPanel, recorder: EventRecorder, frames: int):
    """Fire synthetic input without opening a window and print a summary."""
    keys = "abcdefghijklmnopqrstuvwxyz"
    failed = 0
    for _ in range(frames):
        try:
            if random.random() < 0.8:
                panel.press(random.choice(keys))
            else:
                panel.click((random.randrange(config.SCREEN_W), random.randrange(config.SCREEN_H)))
        except Exception as e:
            failed += 1
            logging.getLogger("run").warning("fire failed: %s", e)

    stats = panel.events.stats
    print(f"frames={frames} fires={stats.fires} delivered={stats.deliveries} "
          f"failed={stats.failures} aborted={failed}")
    for name, count in sorted(stats.fires_by_event.items()):
        print(f"  {name:<8} fired {count:>5}  recorded {recorder.count(name):>5}")


def build_panel(policy=None, history=None):
    """InputPanel wired to a recorder (history fires kept) and log observers."""
    panel = InputPanel(error_policy=policy)
    recorder = EventRecorder(maxlen=history).attach(panel.events, "key", "click")
    log = logging.getLogger("run")
    panel.observable.add_observers({
        "key": lambda key: log.info("key %s", key),
        "click": lambda pos: log.info("click at %(x)d,%(y)d", pos),
    })
    return panel, recorder


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--policy", "-p",
        help="observer error policy: raise / isolate / collect",
        choices=["raise", "isolate", "collect"],
        default=config.DEFAULT_ERROR_POLICY,
    )
    parser.add_argument(
        "--log-level",
        help="logging level (DEBUG shows every register / deliver)",
        default=config.LOG_LEVEL,
    )
    parser.add_argument(
        "--headless",
        help="fire N synthetic inputs without a window",
        type=int,
        default=None,
    )
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format=config.LOG_FORMAT)

    # headless runs keep every fire so the summary counts are exact
    panel, recorder = build_panel(args.policy, history=args.headless)

    if args.headless is not None:
        run_headless(panel, recorder, args.headless)
        return

    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
    pygame.display.set_caption("Observable demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("consolas,menlo,monospace", 16)

    # UI state
    faulty_attached = False
    recorder_attached = True
    last_error = None
    time_s = 0.0

    running = True
    while running:
        time_s += clock.tick(config.FPS) / 1000.0

        for e in pygame.event.get():
            try:
                if e.type == pygame.QUIT:
                    running = False
                elif e.type == pygame.KEYDOWN:
                    if e.key == pygame.K_ESCAPE:
                        running = False
                    elif e.key == pygame.K_F1:
                        faulty_attached = toggle(panel, "key", faulty_observer, faulty_attached)
                    elif e.key == pygame.K_F2:
                        if recorder_attached:
                            recorder.detach(panel.events)
                        else:
                            recorder.attach(panel.events, "key", "click")
                        recorder_attached = not recorder_attached
                    else:
                        panel.press(pygame.key.name(e.key))
                        last_error = None
                elif e.type == pygame.MOUSEBUTTONDOWN:
                    panel.click(e.pos)
                    last_error = None
            except Exception as ex:
                # raise / collect policies surface observer failures here
                print("Observer failed:", ex)
                last_error = str(ex)

        render(screen, font, time_s, panel.events)
        draw_hud(screen, font, time_s, panel.events, recorder,
                 last_error=last_error, faulty_attached=faulty_attached)

        pygame.display.flip()

    pygame.quit()
    sys.exit(0)


if __name__ == "__main__":
    main()
