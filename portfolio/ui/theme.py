"""
Tema claro/escuro com persistência e transição em duas fases.

toggle():
  t=0                      -> transitioning = True
  t=THEME_SWAP_DELAY_MS    -> inverte, persiste e aplica no documento
  t=THEME_SETTLE_DELAY_MS  -> transitioning = False

Os timers são jobs únicos no scheduler e não são cancelados: toggles
sobrepostos entram na fila, um após o outro.
"""
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from threading import Lock
from typing import Callable, Optional

from apscheduler.schedulers.background import BackgroundScheduler

from portfolio.storage.preferences import PreferenceStore

logger = logging.getLogger(__name__)

THEME_KEY = "theme"
THEME_SWAP_DELAY_MS = 150
THEME_SETTLE_DELAY_MS = 300


class ThemePreference(str, Enum):
    light = "light"
    dark = "dark"

    def flipped(self) -> "ThemePreference":
        return ThemePreference.light if self is ThemePreference.dark else ThemePreference.dark


def system_color_scheme() -> Optional[ThemePreference]:
    """Sinal do sistema (PREFERS_COLOR_SCHEME=light|dark), se houver."""
    raw = (os.getenv("PREFERS_COLOR_SCHEME") or "").strip().lower()
    try:
        return ThemePreference(raw)
    except ValueError:
        return None


@dataclass
class DocumentScope:
    """Escopo de apresentação do documento (equivalente ao <html data-theme>)."""
    theme: Optional[ThemePreference] = None

    def apply(self, theme: ThemePreference):
        self.theme = theme


class ThemeController:
    def __init__(
        self,
        store: PreferenceStore,
        scheduler=None,
        document: Optional[DocumentScope] = None,
        os_signal: Callable[[], Optional[ThemePreference]] = system_color_scheme,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.store = store
        self.document = document or DocumentScope()
        self._clock = clock
        self._lock = Lock()
        if scheduler is None:
            scheduler = BackgroundScheduler(job_defaults={"misfire_grace_time": 5})
            scheduler.start()
        self.scheduler = scheduler

        self._theme = self._initial(os_signal)
        self._transitioning = False
        self.document.apply(self._theme)

    def _initial(self, os_signal) -> ThemePreference:
        stored = self.store.get(THEME_KEY)
        if stored:
            try:
                return ThemePreference(stored)
            except ValueError:
                logger.warning("Valor de tema inválido no armazenamento: %r", stored)
        return os_signal() or ThemePreference.dark

    @property
    def theme(self) -> ThemePreference:
        return self._theme

    @property
    def transitioning(self) -> bool:
        return self._transitioning

    def toggle(self):
        started = self._clock()
        self._transitioning = True
        self.scheduler.add_job(
            self._swap, "date", run_date=started + timedelta(milliseconds=THEME_SWAP_DELAY_MS)
        )
        self.scheduler.add_job(
            self._settle, "date", run_date=started + timedelta(milliseconds=THEME_SETTLE_DELAY_MS)
        )

    def _swap(self):
        with self._lock:
            self._theme = self._theme.flipped()
            self.store.set(THEME_KEY, self._theme.value)
            self.document.apply(self._theme)
        logger.debug("Tema aplicado: %s", self._theme.value)

    def _settle(self):
        self._transitioning = False

    def shutdown(self):
        if isinstance(self.scheduler, BackgroundScheduler) and self.scheduler.running:
            self.scheduler.shutdown(wait=False)
