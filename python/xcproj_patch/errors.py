class PatchError(Exception):
  pass


class InvalidInput(PatchError):
  """Bad invocation parameter: wrong suffix, missing file, malformed config."""


class UnsupportedCapability(PatchError):

  def __init__(self, capability):
    self.capability = capability
    super().__init__(f"{capability} is not supported or it's wrong.")
