"""
The six field-update passes.

Each patcher holds its own input and mutates the project model (or a plist on
disk) in `apply`. The runner calls them in `ORDER`, skipping empty ones.
"""

import os

from .capabilities import system_capabilities
from .errors import InvalidInput
from .plist_io import read_plist, write_plist

LDFLAGS_KEY = "OTHER_LDFLAGS"


def setting_value(value):
  if isinstance(value, bool):
    return "YES" if value else "NO"
  if isinstance(value, (list, dict)):
    return value
  return str(value)


class Patcher:
  title = ""

  def is_empty(self):
    raise NotImplementedError

  def apply(self, project, log):
    raise NotImplementedError


class EntitlementsWriter(Patcher):
  title = "Entitlements"

  def __init__(self, path, entitlements):
    self.path = path
    self.entitlements = dict(entitlements or {})

  def is_empty(self):
    return not self.entitlements

  def apply(self, project, log):
    if not self.path:
      raise InvalidInput("entitlements given without an entitlements path")
    log.important("Updating Entitlements")
    is_new = not os.path.exists(self.path)
    if is_new:
      log.message(f" - Creating Entitlements file in {self.path}")
    else:
      log.message(f" - Updating Entitlements file in {self.path}")
    # existing content is replaced, not merged
    write_plist(self.path, self.entitlements)
    if is_new:
      log.important("Referencing Entitlements file into the project")
      project.add_file_reference(self.path)
    log.success("Entitlements Successfully Updated.")


class CapabilityPatcher(Patcher):
  title = "Capabilities"

  def __init__(self, capabilities):
    self.capabilities = dict(capabilities or {})

  def is_empty(self):
    return not self.capabilities

  def apply(self, project, log):
    log.important("Updating Capabilities")
    caps = system_capabilities(self.capabilities)
    for bundle, state in caps.items():
      log.message(f" - Updating {bundle} to {state['enabled']}")
    project.set_system_capabilities(caps)
    log.success("Capabilities Successfully Updated.")


class SettingsPatcher(Patcher):
  title = "Build Settings"

  def __init__(self, build_settings):
    self.build_settings = dict(build_settings or {})

  def is_empty(self):
    return not self.build_settings

  def apply(self, project, log):
    log.important("Updating Build Settings")
    configs = project.configurations()
    for key, value in self.build_settings.items():
      value = setting_value(value)
      for config in configs:
        log.message(f" - Updating {key} to {value} in {project.configuration_name(config)}")
        project.set_setting(config, str(key), value)
    log.success("Build Settings Successfully Updated.")


class PlistPatcher(Patcher):
  title = "Plist"

  def __init__(self, path, values):
    self.path = path
    self.values = dict(values or {})

  def is_empty(self):
    return not (self.path and self.values)

  def apply(self, project, log):
    log.important("Updating Plist")
    plist, fmt = read_plist(self.path)
    if not isinstance(plist, dict):
      raise InvalidInput(f"Plist root is not a dictionary: {self.path}")
    for key, value in self.values.items():
      key = str(key)
      if key in plist:
        log.message(f" - Updating {key}")
      else:
        log.message(f" - Creating {key} cause it does not exists in Plist")
      plist[key] = value
    write_plist(self.path, plist, fmt)
    log.success("Plist Successfully Updated.")


class FrameworkLinker(Patcher):
  title = "Frameworks"

  def __init__(self, frameworks):
    self.frameworks = list(frameworks or [])

  def is_empty(self):
    return not self.frameworks

  def apply(self, project, log):
    log.important("Updating Frameworks")
    for name in self.frameworks:
      if not project.has_framework(f"{name}.framework"):
        log.message(f" - Skipping {name}, not in the Frameworks group")
        continue
      log.message(f" - Updating {name}")
      project.link_framework(name)
    log.success("Frameworks Successfully Updated.")


class LdFlagsPatcher(Patcher):
  title = "OtherLdFlags"

  def __init__(self, flags):
    self.flags = list(flags or [])

  def is_empty(self):
    return not self.flags

  def apply(self, project, log):
    log.important("Updating OtherLdFlags")
    configs = project.configurations()
    for flag in self.flags:
      for config in configs:
        name = project.configuration_name(config)
        current = project.get_setting(config, LDFLAGS_KEY)
        if not isinstance(current, list):
          log.message(f" - Skipping OtherLdFlags {flag} in {name}, {LDFLAGS_KEY} is not a list")
          continue
        log.message(f" - Updating OtherLdFlags {flag} in {name}")
        if flag not in current:
          current.append(flag)
    log.success("OtherLdFlags Successfully Updated.")
