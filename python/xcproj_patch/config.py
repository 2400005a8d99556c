"""
Options for a run, merged from a JSON config file and the environment.

The config file is a single JSON object using the same keys as `Options`:

  {
    "xcodeproj_path": "App/App.xcodeproj",
    "build_settings": {"ENABLE_BITCODE": false, "SWIFT_VERSION": "5.0"},
    "capabilities": {"push_notifications": true},
    "frameworks": ["StoreKit"],
    "other_ldflags": ["-ObjC"]
  }
"""

import json
import os
from dataclasses import dataclass, field, fields

from .capabilities import capability_enabled
from .errors import InvalidInput

ENV_PATHS = {
  "xcodeproj_path": "XCODEPROJ_PATH",
  "plist_path": "PLIST_PATH",
  "entitlements_path": "ENTITLEMENTS_PATH",
}

MAPPING_KEYS = ("plist", "entitlements", "capabilities", "build_settings")
LIST_KEYS = ("frameworks", "other_ldflags")


@dataclass
class Options:
  xcodeproj_path: str = ""
  plist_path: str = ""
  entitlements_path: str = ""
  plist: dict = field(default_factory=dict)
  entitlements: dict = field(default_factory=dict)
  capabilities: dict = field(default_factory=dict)
  build_settings: dict = field(default_factory=dict)
  frameworks: list = field(default_factory=list)
  other_ldflags: list = field(default_factory=list)
  verbose: bool = False


def options_from_dict(conf):
  if not isinstance(conf, dict):
    raise InvalidInput("config must be a JSON object")
  known = {f.name for f in fields(Options)}
  unknown = sorted(set(conf) - known)
  if unknown:
    raise InvalidInput(f"unknown config keys: {', '.join(unknown)}")
  for key in MAPPING_KEYS:
    if conf.get(key) is not None and not isinstance(conf[key], dict):
      raise InvalidInput(f"{key} must be an object")
  for key in LIST_KEYS:
    if conf.get(key) is not None and not isinstance(conf[key], list):
      raise InvalidInput(f"{key} must be an array")
  for value in (conf.get("capabilities") or {}).values():
    capability_enabled(value)
  kwargs = {key: value for key, value in conf.items() if value is not None}
  return Options(**kwargs)


def load_config(path):
  try:
    with open(path) as f:
      conf = json.load(f)
  except FileNotFoundError:
    raise InvalidInput(f"Could not find config file {path}") from None
  except json.JSONDecodeError as e:
    raise InvalidInput(f"Invalid JSON in {path}: {e}") from e
  return options_from_dict(conf)


def apply_env(options, environ=None):
  """Fill empty path options from XCODEPROJ_PATH / PLIST_PATH / ENTITLEMENTS_PATH."""
  environ = os.environ if environ is None else environ
  for key, env_name in ENV_PATHS.items():
    if not getattr(options, key) and environ.get(env_name):
      setattr(options, key, environ[env_name])
  return options


def validate(options):
  project = options.xcodeproj_path
  if not project:
    raise InvalidInput("Please pass the path to the project (-p/--xcodeproj)")
  if not project.rstrip("/").endswith(".xcodeproj"):
    raise InvalidInput("Please pass the path to the project, not the workspace")
  if not os.path.exists(project):
    raise InvalidInput(f"Could not find Xcode project {project}")

  if options.plist_path:
    if not options.plist_path.endswith(".plist"):
      raise InvalidInput("Please pass the path to the plist")
    if not os.path.exists(options.plist_path):
      raise InvalidInput(f"Could not find plist path {options.plist_path}")

  if options.entitlements and not options.entitlements_path:
    raise InvalidInput("entitlements given without an entitlements path")
  return options
