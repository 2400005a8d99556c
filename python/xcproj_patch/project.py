"""
Thin layer over `pbxproj.XcodeProject`.

The patchers never touch the pbxproj object graph directly; they go through
`XcodeProjectModel`, which pins the first native target of the project and
exposes only what they need. Tests swap in an in-memory model with the same
methods.
"""

import os

from pbxproj import PBXGenericObject, XcodeProject
from pbxproj.PBXList import PBXList
from pbxproj.pbxextensions import FileOptions, TreeType

from .errors import InvalidInput

FRAMEWORKS_GROUP = "Frameworks"


def pbxproj_path(xcodeproj_path):
  return os.path.join(xcodeproj_path, "project.pbxproj")


def _node(parent, mapping):
  return PBXGenericObject(parent).parse(mapping)


def _display_name(obj):
  name = obj["name"]
  if name:
    return name
  return os.path.basename(obj["path"] or "")


class XcodeProjectModel:

  def __init__(self, project, path=None):
    self.project = project
    self.path = path
    self.root = project.objects[project["rootObject"]]
    self.target_id, self.target = self._first_native_target()

  @classmethod
  def load(cls, xcodeproj_path):
    path = pbxproj_path(xcodeproj_path)
    if not os.path.isfile(path):
      raise InvalidInput(f"Could not find {path}")
    return cls(XcodeProject.load(path), path=path)

  def _first_native_target(self):
    for target_id in self.root["targets"] or []:
      target = self.project.objects[target_id]
      if target is not None and target["isa"] == "PBXNativeTarget":
        return str(target_id), target
    raise InvalidInput("Project has no native target")

  @property
  def target_name(self):
    return self.target["name"]

  def configurations(self):
    config_list = self.project.objects[self.target["buildConfigurationList"]]
    return [self.project.objects[key] for key in config_list["buildConfigurations"]]

  def configuration_name(self, config):
    return config["name"]

  def get_setting(self, config, key):
    settings = config["buildSettings"]
    if settings is None:
      return None
    return settings[key]

  def set_setting(self, config, key, value):
    if config["buildSettings"] is None:
      config["buildSettings"] = _node(config, {})
    settings = config["buildSettings"]
    if isinstance(value, dict):
      value = _node(settings, value)
    elif isinstance(value, list):
      value = PBXList(value)
    settings[key] = value

  def _frameworks_group(self):
    groups = self.project.get_groups_by_name(FRAMEWORKS_GROUP)
    return groups[0] if groups else None

  def has_framework(self, filename):
    group = self._frameworks_group()
    if group is None:
      return False
    for child_id in group["children"] or []:
      child = self.project.objects[child_id]
      if child is not None and _display_name(child) == filename:
        return True
    return False

  def link_framework(self, name):
    """New SDKROOT reference in the Frameworks group, weak-linked into the target."""
    return self.project.add_file(
      f"System/Library/Frameworks/{name}.framework",
      parent=self._frameworks_group(),
      tree=TreeType.SDKROOT,
      target_name=self.target_name,
      force=True,
      file_options=FileOptions(weak=True, embed_framework=False))

  def add_file_reference(self, path):
    source_root = os.path.dirname(os.path.dirname(self.path)) if self.path else os.getcwd()
    rel = os.path.relpath(os.path.abspath(path), source_root)
    return self.project.add_file(
      rel,
      tree=TreeType.SOURCE_ROOT,
      force=False,
      file_options=FileOptions(create_build_files=False, ignore_unknown_type=True))

  def system_capabilities(self):
    attrs = self._target_attributes(create=False)
    if attrs is None:
      return None
    return attrs["SystemCapabilities"]

  def set_system_capabilities(self, capabilities):
    attrs = self._target_attributes(create=True)
    attrs["SystemCapabilities"] = _node(attrs, capabilities)

  def _target_attributes(self, create):
    root_attrs = self.root["attributes"]
    if root_attrs is None:
      if not create:
        return None
      self.root["attributes"] = _node(self.root, {})
      root_attrs = self.root["attributes"]
    all_targets = root_attrs["TargetAttributes"]
    if all_targets is None:
      if not create:
        return None
      root_attrs["TargetAttributes"] = _node(root_attrs, {})
      all_targets = root_attrs["TargetAttributes"]
    attrs = all_targets[self.target_id]
    if attrs is None and create:
      all_targets[self.target_id] = _node(all_targets, {})
      attrs = all_targets[self.target_id]
    return attrs

  def save(self):
    self.project.save(self.path)
