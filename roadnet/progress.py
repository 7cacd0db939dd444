"""A textual progress indicator."""

import sys
import threading


class ProgressBar:
    """Prints percentages and dots as work progresses towards a number of steps."""

    def __init__(self, num_steps=None, verbose=True, stream=None):
        self.stream = sys.stdout if stream is None else stream
        self.verbose = verbose
        self.num_steps = 0
        self.steps_done = 0
        self.percentage_done = 0
        self.percentage_output_interval = 20
        self.dot_output_interval = 5
        self._lock = threading.Lock()
        if num_steps is not None:
            self.start(num_steps)

    def start(self, num_steps):
        """Initialise the bar with the given number of steps."""
        if num_steps < 0:
            raise ValueError(f"negative number of steps -- {num_steps}")
        self.num_steps = num_steps
        self.steps_done = 0
        self.percentage_done = 0
        if self.verbose:
            self.stream.write("0% ")
            self.stream.flush()

    def advance_to(self, step):
        """Advance the bar to the given step."""
        if not self.verbose:
            return
        with self._lock:
            if not self.steps_done <= step <= self.num_steps:
                raise ValueError(f"step out of range -- {step}")
            self.steps_done = step
            self._print(self._percentage(step))

    def finish(self):
        """Advance the bar to 100%."""
        self.advance_to(self.num_steps)

    def step(self, steps=1):
        """Advance the bar by the given number of steps."""
        if steps < 0:
            raise ValueError(f"negative number of steps -- {steps}")
        if not self.verbose:
            return
        with self._lock:
            if self.steps_done + steps > self.num_steps:
                raise ValueError(f"step out of range -- {self.steps_done + steps}")
            self.steps_done += steps
            self._print(self._percentage(self.steps_done))

    def __iadd__(self, steps):
        self.step(steps)
        return self

    def _percentage(self, done):
        if self.num_steps == 0:
            return 100
        return done * 100 // self.num_steps

    def _print(self, until):
        for i in range(self.percentage_done + 1, until + 1):
            if i % self.percentage_output_interval == 0:
                self.stream.write(f" {i}% ")
            elif i % self.dot_output_interval == 0:
                self.stream.write(".")
        self.stream.flush()
        self.percentage_done = max(self.percentage_done, until)