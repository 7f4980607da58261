import logging
import time

import numpy as np

from charting.config import CFG
from charting.datasource import ActionsDataSource, Debounced
from visualization.matplotlib import final_charts
from visualization.pygame.monitor import PygameMonitor


def run():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    cfg = CFG()
    rng = np.random.default_rng(cfg.SEED)

    user_actions = ActionsDataSource(cfg.USER_PERIOD, rng, name="user")
    admin_actions = Debounced(ActionsDataSource(cfg.ADMIN_PERIOD, rng, name="admin"), cfg.ADMIN_DEBOUNCE)
    sources = [user_actions, admin_actions]

    monitor = PygameMonitor(cfg)
    monitor.add_panel("User actions", user_actions)
    monitor.add_panel("Admin actions", admin_actions)

    now = time.time()
    for source in sources:
        source.start(now)

    was_paused = False
    try:
        while True:
            if monitor.should_stop:
                print("Stopped by user")
                break

            now = time.time()
            if monitor.is_paused:
                was_paused = True
            else:
                # restart timers after a pause instead of replaying missed ticks
                if was_paused:
                    for source in sources:
                        source.start(now)
                    was_paused = False
                for source in sources:
                    source.poll(now)

            # always render monitor
            if not monitor.render():
                break
    finally:
        final_charts(monitor.panels, cfg)
        monitor.cleanup()


if __name__ == "__main__":
    run()
