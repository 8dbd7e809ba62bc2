"""Cancellable periodic tick timer."""

import logging

import pygame

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class TickTimer:
    """Base timer: at most one live interval, restarted by replacement."""

    def __init__(self):
        self.interval_ms = None

    @property
    def running(self):
        return self.interval_ms is not None

    def start(self, interval_ms):
        """Start ticking every ``interval_ms``, replacing any running interval."""
        if interval_ms <= 0:
            raise ValueError("Tick interval must be positive.")
        self._schedule(interval_ms)
        self.interval_ms = interval_ms

    def cancel(self):
        """Stop ticking. Safe to call when already stopped."""
        if self.interval_ms is None:
            return
        self._unschedule()
        self.interval_ms = None

    def is_current(self, event):
        """True if ``event`` was posted by the interval that is running now."""
        return self.running

    def _schedule(self, interval_ms):
        raise NotImplementedError

    def _unschedule(self):
        raise NotImplementedError


class PygameTickTimer(TickTimer):
    """Posts ``event_type`` to the pygame event queue every interval.

    Each interval stamps its events with a generation number, so ticks that
    were already fetched from the queue when the timer was replaced or
    cancelled can be told apart and dropped.
    """

    def __init__(self, event_type=TICK_EVENT):
        super().__init__()
        self.event_type = event_type
        self.generation = 0

    def is_current(self, event):
        return self.running and getattr(event, "generation", None) == self.generation

    def _schedule(self, interval_ms):
        self.generation += 1
        pygame.event.clear(self.event_type)
        # set_timer replaces an existing timer for the same event type.
        pygame.time.set_timer(pygame.event.Event(self.event_type, generation=self.generation), interval_ms)
        logger.debug("Tick timer set to %d ms (generation %d)", interval_ms, self.generation)

    def _unschedule(self):
        self.generation += 1
        pygame.time.set_timer(self.event_type, 0)
        pygame.event.clear(self.event_type)
        logger.debug("Tick timer cancelled")
