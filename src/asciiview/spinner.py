import itertools
import queue
import sys
import threading
import time

from asciiview.charsets import SPINNER_FRAMES

SPINNER_INTERVAL = 0.05


class Spinner:
    """Redraws a one-cell progress indicator on its own thread until told to stop.

    The thread is driven by a control queue: ``True`` keeps it running, ``False``
    ends it. Use as a context manager so it is stopped on every exit path.
    """

    def __init__(self, stream=None, frames: str = SPINNER_FRAMES, interval: float = SPINNER_INTERVAL):
        self.stream = stream if stream is not None else sys.stderr
        self.frames = frames
        self.interval = interval
        self.control: queue.Queue[bool] = queue.Queue()
        self._thread = threading.Thread(target=self._run, name="spinner", daemon=True)

    def _run(self):
        for frame in itertools.cycle(self.frames):
            try:
                if not self.control.get_nowait():
                    return
            except queue.Empty:
                pass
            self.stream.write(f"{frame}\r")
            self.stream.flush()
            time.sleep(self.interval)

    def start(self):
        self._thread.start()
        self.control.put(True)

    def stop(self):
        self.control.put(False)
        self._thread.join()
        # wipe the last frame
        self.stream.write(" \r")
        self.stream.flush()

    @property
    def running(self) -> bool:
        return self._thread.is_alive()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *exc):
        self.stop()
        return False
