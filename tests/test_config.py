import json

import pytest

from xcproj_patch.config import Options, apply_env, load_config, options_from_dict, validate
from xcproj_patch.errors import InvalidInput


def test_load_config_reads_json(tmp_path):
  path = tmp_path / "muxed.json"
  path.write_text(json.dumps({
    "xcodeproj_path": "App.xcodeproj",
    "build_settings": {"ENABLE_BITCODE": False},
    "frameworks": ["StoreKit"],
    "verbose": True,
  }))
  options = load_config(str(path))
  assert options.xcodeproj_path == "App.xcodeproj"
  assert options.build_settings == {"ENABLE_BITCODE": False}
  assert options.frameworks == ["StoreKit"]
  assert options.capabilities == {}
  assert options.verbose is True


def test_load_config_missing_file(tmp_path):
  with pytest.raises(InvalidInput, match="Could not find config file"):
    load_config(str(tmp_path / "nope.json"))


def test_load_config_bad_json(tmp_path):
  path = tmp_path / "muxed.json"
  path.write_text("{not json")
  with pytest.raises(InvalidInput, match="Invalid JSON"):
    load_config(str(path))


@pytest.mark.parametrize("conf, message", [
  ([], "JSON object"),
  ({"xcodeproj": "x"}, "unknown config keys: xcodeproj"),
  ({"capabilities": ["push_notifications"]}, "capabilities must be an object"),
  ({"other_ldflags": "-ObjC"}, "other_ldflags must be an array"),
])
def test_options_from_dict_rejects_bad_shapes(conf, message):
  with pytest.raises(InvalidInput, match=message):
    options_from_dict(conf)


def test_options_from_dict_null_means_default():
  options = options_from_dict({"plist": None, "frameworks": None})
  assert options.plist == {}
  assert options.frameworks == []


def test_apply_env_fills_only_missing_paths():
  options = Options(plist_path="Given.plist")
  apply_env(options, {
    "XCODEPROJ_PATH": "Env.xcodeproj",
    "PLIST_PATH": "Env.plist",
    "ENTITLEMENTS_PATH": "Env.entitlements",
  })
  assert options.xcodeproj_path == "Env.xcodeproj"
  assert options.plist_path == "Given.plist"
  assert options.entitlements_path == "Env.entitlements"


def test_validate_accepts_existing_project(tmp_path):
  proj = tmp_path / "App.xcodeproj"
  proj.mkdir()
  options = Options(xcodeproj_path=str(proj))
  assert validate(options) is options


@pytest.mark.parametrize("name, message", [
  ("", "path to the project"),
  ("App.xcworkspace", "not the workspace"),
  ("Missing.xcodeproj", "Could not find Xcode project"),
])
def test_validate_project_path(tmp_path, name, message):
  path = str(tmp_path / name) if name else ""
  with pytest.raises(InvalidInput, match=message):
    validate(Options(xcodeproj_path=path))


def test_validate_plist_path(tmp_path):
  proj = tmp_path / "App.xcodeproj"
  proj.mkdir()
  (tmp_path / "Info.txt").write_text("")
  with pytest.raises(InvalidInput, match="path to the plist"):
    validate(Options(xcodeproj_path=str(proj), plist_path=str(tmp_path / "Info.txt")))
  with pytest.raises(InvalidInput, match="Could not find plist path"):
    validate(Options(xcodeproj_path=str(proj), plist_path=str(tmp_path / "Info.plist")))


def test_validate_entitlements_need_a_path(tmp_path):
  proj = tmp_path / "App.xcodeproj"
  proj.mkdir()
  with pytest.raises(InvalidInput, match="entitlements path"):
    validate(Options(xcodeproj_path=str(proj), entitlements={"aps-environment": "development"}))


def test_options_from_dict_accepts_capability_words():
  options = options_from_dict({"capabilities": {"push_notifications": "no", "health_kit": True}})
  assert options.capabilities == {"push_notifications": "no", "health_kit": True}


@pytest.mark.parametrize("value", ["disabled", 2, None])
def test_options_from_dict_rejects_capability_states(value):
  with pytest.raises(InvalidInput, match="must be on or off"):
    options_from_dict({"capabilities": {"push_notifications": value}})
