"""
Configuration store tests.
"""
from datetime import timedelta

import pytest
import yaml

from training_config.config import TrainingConfiguration, create_default_configuration
from training_config.core import InvalidArgument, StoreError
from training_config.storage import InMemoryConfigurationStore, YamlFileConfigurationStore


@pytest.fixture
def file_store(tmp_path):
    return YamlFileConfigurationStore(tmp_path / "store")


def test_round_trip_preserves_configuration(file_store):
    config = create_default_configuration()
    file_store.save("training-config", config)
    assert file_store.load("training-config", TrainingConfiguration) == config


def test_saved_file_uses_camel_case_and_iso_durations(file_store):
    file_store.save("training-config", create_default_configuration())
    payload = yaml.safe_load(file_store.path_for("training-config").read_text(encoding="utf-8"))

    assert payload["scenarioCount"] == 3
    assert payload["scenarioMix"]["basicOrdering"] == 0.4
    assert payload["safety"]["maxTrainingDuration"].startswith("PT")
    assert payload["safety"]["autoBackupInterval"].startswith("PT")


def test_missing_record_loads_as_none(file_store):
    assert file_store.load("training-config", TrainingConfiguration) is None
    assert not file_store.exists("training-config")


def test_empty_file_is_treated_as_absent_and_removed(file_store):
    path = file_store.path_for("training-config")
    path.write_text("  \n", encoding="utf-8")

    assert file_store.load("training-config", TrainingConfiguration) is None
    assert not path.exists()


def test_corrupt_yaml_raises_store_error(file_store):
    file_store.path_for("training-config").write_text("scenarioCount: [unclosed", encoding="utf-8")
    with pytest.raises(StoreError) as excinfo:
        file_store.load("training-config", TrainingConfiguration)
    assert excinfo.value.code == "store_error"
    assert "consider deleting" in excinfo.value.message


def test_schema_mismatch_raises_store_error(file_store):
    payload = create_default_configuration().to_payload()
    payload["unexpectedSetting"] = True
    file_store.path_for("training-config").write_text(yaml.safe_dump(payload), encoding="utf-8")
    with pytest.raises(StoreError):
        file_store.load("training-config", TrainingConfiguration)


def test_missing_section_loads_for_validation(file_store):
    payload = create_default_configuration().to_payload()
    del payload["focus"]
    file_store.path_for("training-config").write_text(yaml.safe_dump(payload), encoding="utf-8")

    config = file_store.load("training-config", TrainingConfiguration)
    assert config.focus is None


def test_save_leaves_no_temp_file(file_store):
    file_store.save("training-config", create_default_configuration())
    assert [path.name for path in file_store.data_dir.iterdir()] == ["training-config.yaml"]


def test_invalid_utf8_raises_store_error(file_store):
    file_store.path_for("training-config").write_bytes(b"scenarioCount: \xff\xfe\n")
    with pytest.raises(StoreError) as excinfo:
        file_store.load("training-config", TrainingConfiguration)
    assert "not valid UTF-8" in excinfo.value.message


def test_null_scalar_loads_for_validation(file_store):
    payload = create_default_configuration().to_payload()
    payload["scenarioCount"] = None
    del payload["safety"]["maxPromptLength"]
    file_store.path_for("training-config").write_text(yaml.safe_dump(payload), encoding="utf-8")

    config = file_store.load("training-config", TrainingConfiguration)
    assert config.scenario_count is None
    assert config.safety.max_prompt_length is None


@pytest.mark.parametrize("key", ["runs/alpha", "alpha beta", "../escape"])
def test_unsafe_keys_are_rejected(file_store, key):
    with pytest.raises(InvalidArgument):
        file_store.save(key, create_default_configuration())
    assert file_store.list_keys() == []


def test_delete_exists_and_list_keys(file_store):
    config = create_default_configuration()
    file_store.save("training-config", config)
    file_store.save("training-backup", config)
    file_store.save("other", config)

    assert file_store.list_keys() == ["other", "training-backup", "training-config"]
    assert file_store.list_keys("training-*") == ["training-backup", "training-config"]

    file_store.delete("training-backup")
    file_store.delete("never-saved")
    assert not file_store.exists("training-backup")
    assert file_store.exists("training-config")


@pytest.mark.parametrize("key", ["", "   ", "k" * 201])
def test_invalid_keys_are_rejected(file_store, key):
    with pytest.raises(InvalidArgument):
        file_store.load(key, TrainingConfiguration)


def test_in_memory_store_returns_fresh_instances():
    store = InMemoryConfigurationStore()
    config = create_default_configuration()
    store.save("training-config", config)
    config.scenario_count = 42

    loaded = store.load("training-config", TrainingConfiguration)
    assert loaded.scenario_count == 3
    assert loaded.safety.max_training_duration == timedelta(hours=8)
    assert loaded is not store.load("training-config", TrainingConfiguration)


def test_in_memory_store_rejects_none():
    store = InMemoryConfigurationStore()
    with pytest.raises(InvalidArgument):
        store.save("training-config", None)
    assert store.list_keys() == []
