"""
Progress output for the patchers.

Everything below `error` is only emitted when the logger is verbose. Output
goes through a sink so tests can capture it and library callers can mute it.
"""

import sys

PREFIX = "[xcproj-patch]"


class ConsoleSink:

  def write(self, level, text):
    stream = sys.stderr if level == "error" else sys.stdout
    print(f"{PREFIX} {text}", file=stream)


class CaptureSink:

  def __init__(self):
    self.records = []

  def write(self, level, text):
    self.records.append((level, text))

  def lines(self, level=None):
    return [text for lvl, text in self.records if level is None or lvl == level]


class NullSink:

  def write(self, level, text):
    pass


class Logger:

  def __init__(self, verbose=False, sink=None):
    self.verbose = verbose
    self.sink = sink if sink is not None else ConsoleSink()

  def _emit(self, level, text):
    if self.verbose:
      self.sink.write(level, text)

  def message(self, text):
    self._emit("message", text)

  def important(self, text):
    self._emit("important", text)

  def success(self, text):
    self._emit("success", text)

  def error(self, text):
    self.sink.write("error", text)


def null_logger():
  return Logger(verbose=False, sink=NullSink())
