"""Capability symbols and the bundle identifiers Xcode stores them under."""

from enum import Enum

from .errors import InvalidInput, UnsupportedCapability

ENABLED_WORDS = ("true", "yes", "on", "1")
DISABLED_WORDS = ("false", "no", "off", "0")


class Capability(Enum):
  push_notifications = "com.apple.Push"
  in_app_purchases = "com.apple.InAppPurchase"
  game_center = "com.apple.GameCenter.iOS"
  apple_pay = "com.apple.ApplePay"
  app_groups = "com.apple.ApplicationGroups.iOS"
  access_wifi = "com.apple.AccessWiFi"
  auto_fill_credentials = "com.apple.AutoFillCredentialProvider"
  background_modes = "com.apple.BackgroundModes"
  health_kit = "com.apple.HealthKit"


def capability_bundle(capability):
  """Bundle identifier for a capability symbol (enum member or its name)."""
  if isinstance(capability, Capability):
    return capability.value
  try:
    return Capability[str(capability)].value
  except KeyError:
    raise UnsupportedCapability(capability) from None


def unsupported_capabilities(capabilities):
  """Every symbol in `capabilities` that has no bundle identifier."""
  bad = []
  for key in capabilities:
    if not isinstance(key, Capability) and str(key) not in Capability.__members__:
      bad.append(key)
  return bad


def capability_enabled(value):
  """On/off state of a capability: a boolean, 1/0 or an on/off word."""
  if isinstance(value, bool):
    return value
  if isinstance(value, int) and value in (0, 1):
    return bool(value)
  if isinstance(value, str):
    low = value.strip().lower()
    if low in ENABLED_WORDS:
      return True
    if low in DISABLED_WORDS:
      return False
  raise InvalidInput(f"capability value must be on or off, got: {value!r}")


def system_capabilities(capabilities):
  """Build the `SystemCapabilities` map. Nothing is built if any symbol is unknown."""
  bad = unsupported_capabilities(capabilities)
  if bad:
    raise UnsupportedCapability(", ".join(str(key) for key in bad))
  out = {}
  for key, value in capabilities.items():
    out[capability_bundle(key)] = {"enabled": 1 if capability_enabled(value) else 0}
  return out
