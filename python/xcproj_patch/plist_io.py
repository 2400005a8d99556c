import plistlib

from .errors import InvalidInput


def read_plist(path):
  """Return `(obj, fmt)` so the file can be written back in its own format."""
  try:
    with open(path, "rb") as f:
      data = f.read()
  except FileNotFoundError:
    raise InvalidInput(f"Could not find plist path {path}") from None
  fmt = plistlib.FMT_BINARY if data.startswith(b"bplist00") else plistlib.FMT_XML
  try:
    return plistlib.loads(data), fmt
  except plistlib.InvalidFileException as e:
    raise InvalidInput(f"Not a property list: {path}") from e


def write_plist(path, obj, fmt=plistlib.FMT_XML):
  data = plistlib.dumps(obj, fmt=fmt, sort_keys=False)
  with open(path, "wb") as f:
    f.write(data)
