# debounce.py
import threading
from typing import Any, Callable


class Debouncer:
    """
    Segura um valor que muda rápido e só publica quando ele fica parado
    por `delay_ms`. Cada set() reinicia a contagem; só o último valor da
    rajada chega no callback.

    O timer roda em outra thread (threading.Timer por padrão). Para testes,
    passe um `timer_factory` com a mesma assinatura: (segundos, função).
    """

    def __init__(self, delay_ms: int, callback: Callable[[Any], None], timer_factory=threading.Timer):
        if delay_ms < 0:
            raise ValueError("delay_ms não pode ser negativo")
        self.delay_ms = delay_ms
        self._callback = callback
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer = None
        self._generation = 0
        self._closed = False

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def set(self, value: Any) -> None:
        with self._lock:
            if self._closed:
                return
            self._cancel_locked()
            self._generation += 1
            generation = self._generation
            timer = self._timer_factory(self.delay_ms / 1000.0, lambda: self._fire(generation, value))
            if hasattr(timer, "daemon"):
                timer.daemon = True
            self._timer = timer
            timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()

    def close(self) -> None:
        """Desmontagem: cancela o pendente e ignora set() futuros."""
        with self._lock:
            self._closed = True
            self._cancel_locked()

    def _cancel_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        # invalida um timer que já disparou mas ainda não entrou no _fire
        self._generation += 1

    def _fire(self, generation: int, value: Any) -> None:
        with self._lock:
            if self._closed or generation != self._generation:
                return
            self._timer = None
        self._callback(value)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
