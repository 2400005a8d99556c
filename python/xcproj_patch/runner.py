from .config import validate
from .log import null_logger
from .patchers import (
  CapabilityPatcher,
  EntitlementsWriter,
  FrameworkLinker,
  LdFlagsPatcher,
  PlistPatcher,
  SettingsPatcher,
)
from .project import XcodeProjectModel


def build_patchers(options):
  """Patchers in the order they are applied, including empty ones."""
  return [
    EntitlementsWriter(options.entitlements_path, options.entitlements),
    CapabilityPatcher(options.capabilities),
    SettingsPatcher(options.build_settings),
    PlistPatcher(options.plist_path, options.plist),
    FrameworkLinker(options.frameworks),
    LdFlagsPatcher(options.other_ldflags),
  ]


def apply_patchers(project, patchers, log):
  applied = []
  for patcher in patchers:
    if patcher.is_empty():
      continue
    patcher.apply(project, log)
    applied.append(patcher.title)
  return applied


def run(options, log=None, loader=XcodeProjectModel.load):
  log = log if log is not None else null_logger()
  validate(options)
  project = loader(options.xcodeproj_path)
  applied = apply_patchers(project, build_patchers(options), log)
  project.save()
  log.success(f"Updated {options.xcodeproj_path}.")
  return applied
