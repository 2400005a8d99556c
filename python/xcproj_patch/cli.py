"""Command line entry: `configure-xcodeproj` / `python -m xcproj_patch`."""

import argparse

from .capabilities import capability_enabled
from .config import Options, apply_env, load_config
from .errors import InvalidInput, PatchError
from .log import Logger
from .runner import run


def plist_value(raw):
  """`true`/`false` become plist booleans; anything else, numerals included, stays a string."""
  low = raw.strip().lower()
  if low == "true":
    return True
  if low == "false":
    return False
  return raw


def _parse_pairs(specs, option, convert=str):
  out = {}
  for spec in specs:
    if "=" not in spec:
      raise InvalidInput(f"expected KEY=VALUE for {option}, got: {spec}")
    key, value = spec.split("=", 1)
    if not key:
      raise InvalidInput(f"empty KEY in {option}: {spec}")
    out[key] = convert(value)
  return out


def build_parser():
  p = argparse.ArgumentParser(
    prog="configure-xcodeproj",
    description="Update build settings, capabilities, plists, frameworks and "
                "linker flags of an Xcode project in place.")
  p.add_argument("-c", "--config", default="", help="JSON file with the options (muxed.json style)")
  p.add_argument("-p", "--xcodeproj", default="", help="Path to the .xcodeproj (env XCODEPROJ_PATH)")
  p.add_argument("--plist-path", default="", help="Path to the plist to patch (env PLIST_PATH)")
  p.add_argument("--entitlements-path", default="",
                 help="Path to the .entitlements file, or where it should be created (env ENTITLEMENTS_PATH)")
  p.add_argument("--plist", action="append", default=[], metavar="KEY=VALUE",
                 help="Plist key to set (true/false become booleans, everything else a string)")
  p.add_argument("--entitlement", action="append", default=[], metavar="KEY=VALUE",
                 help="Entitlement key to write (true/false become booleans, everything else a string)")
  p.add_argument("--capability", action="append", default=[], metavar="NAME=on|off",
                 help="Capability to enable or disable (e.g. push_notifications=on)")
  p.add_argument("--build-setting", action="append", default=[], metavar="KEY=VALUE",
                 help="Build setting for every configuration of the first target, written verbatim")
  p.add_argument("--framework", action="append", default=[], metavar="NAME",
                 help="System framework already in the Frameworks group to link")
  p.add_argument("--ldflag", action="append", default=[], metavar="FLAG",
                 help="Flag to add to OTHER_LDFLAGS, given as --ldflag=FLAG (e.g. --ldflag=-ObjC)")
  p.add_argument("--verbose", action="store_true", help="Log every step")
  return p


def options_from_args(ns, environ=None):
  options = load_config(ns.config) if ns.config else Options()
  if ns.xcodeproj:
    options.xcodeproj_path = ns.xcodeproj
  if ns.plist_path:
    options.plist_path = ns.plist_path
  if ns.entitlements_path:
    options.entitlements_path = ns.entitlements_path
  options.plist.update(_parse_pairs(ns.plist, "--plist", plist_value))
  options.entitlements.update(_parse_pairs(ns.entitlement, "--entitlement", plist_value))
  options.capabilities.update(_parse_pairs(ns.capability, "--capability", capability_enabled))
  options.build_settings.update(_parse_pairs(ns.build_setting, "--build-setting"))
  options.frameworks.extend(ns.framework)
  options.other_ldflags.extend(ns.ldflag)
  options.verbose = options.verbose or ns.verbose
  return apply_env(options, environ)


def main(argv=None, environ=None, sink=None):
  ns = build_parser().parse_args(argv)
  log = Logger(sink=sink)
  try:
    options = options_from_args(ns, environ)
    log.verbose = options.verbose
    run(options, log)
  except PatchError as e:
    log.error(f"Error: {e}")
    raise SystemExit(1) from e
  return 0
