import shutil
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


class FakeProject:
  """In-memory stand-in for XcodeProjectModel."""

  def __init__(self, configs=None, frameworks=(), capabilities=None):
    self.configs = configs if configs is not None else {"Debug": {}, "Release": {}}
    self.frameworks = list(frameworks)
    self.capabilities = capabilities
    self.linked = []
    self.file_refs = []
    self.saves = 0

  def configurations(self):
    return list(self.configs)

  def configuration_name(self, config):
    return config

  def get_setting(self, config, key):
    return self.configs[config].get(key)

  def set_setting(self, config, key, value):
    self.configs[config][key] = value

  def has_framework(self, filename):
    return filename in self.frameworks

  def link_framework(self, name):
    self.linked.append(name)

  def add_file_reference(self, path):
    self.file_refs.append(path)

  def system_capabilities(self):
    return self.capabilities

  def set_system_capabilities(self, capabilities):
    self.capabilities = capabilities

  def save(self):
    self.saves += 1


@pytest.fixture
def fake_project():
  return FakeProject()


@pytest.fixture
def demo_xcodeproj(tmp_path):
  dst = tmp_path / "Demo.xcodeproj"
  shutil.copytree(FIXTURES / "Demo.xcodeproj", dst)
  return dst
