import json
from pathlib import Path

import pytest

from metadata.index import MetadataIndex
from repository.store import RepositoryError, SubmoduleRepository
from structure.codec import decode_schema
from utils import PathValidationError


@pytest.fixture
def repository(tmp_path: Path) -> SubmoduleRepository:
    return SubmoduleRepository(tmp_path, "products")


def test_construction_creates_nothing(tmp_path: Path, repository):
    assert not repository.has_structure()
    assert list(tmp_path.iterdir()) == []


def test_saves_and_loads_schemas(repository):
    schema = decode_schema({"name": "", "tags": [{"label": ""}]})
    metadata_schema = decode_schema({"name": "", "tags": [{}]})

    structure_path, metadata_structure_path = repository.save_schemas(schema, metadata_schema)

    assert structure_path.name == ".structure"
    assert metadata_structure_path.name == ".metadataStructure"
    assert json.loads(structure_path.read_text(encoding="utf-8")) == {"name": "", "tags": [{"label": ""}]}
    assert repository.has_structure()
    assert repository.load_schema() == schema
    assert repository.load_metadata_schema() == metadata_schema


def test_documents_use_configured_indent(tmp_path: Path):
    repository = SubmoduleRepository(tmp_path, "products", json_indent=4)
    repository.save_schemas(decode_schema({"a": ""}), decode_schema({}))

    assert repository.structure_path.read_text(encoding="utf-8") == '{\n    "a": ""\n}'


def test_instance_is_overwritten_not_merged(repository):
    path = repository.save_instance("w1", {"name": "one", "extra": "x"})
    repository.save_instance("w1", {"name": "two"})

    assert path == repository.path / "w1" / "info.json"
    assert json.loads(path.read_text(encoding="utf-8")) == {"name": "two"}


def test_non_ascii_values_are_written_verbatim(repository):
    repository.save_instance("w1", {"name": "café"})

    assert "café" in repository.instance_path("w1").read_text(encoding="utf-8")


def test_missing_metadata_index_is_empty(repository):
    index = repository.load_metadata_index()

    assert len(index) == 0
    assert not repository.metadata_index_path.exists()


def test_metadata_index_round_trip(repository):
    index = MetadataIndex()
    index.upsert("w1", {"name": "one"})
    repository.save_metadata_index(index)

    assert repository.load_metadata_index().to_document() == {"w1": {"name": "one"}}


def test_malformed_json_raises_repository_error(repository):
    repository.path.mkdir(parents=True)
    repository.structure_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(RepositoryError):
        repository.load_schema()


def test_invalid_schema_document_raises_repository_error(repository):
    repository.path.mkdir(parents=True)
    repository.structure_path.write_text('{"count": 3}', encoding="utf-8")

    with pytest.raises(RepositoryError, match="count"):
        repository.load_schema()


def test_non_object_metadata_index_raises_repository_error(repository):
    repository.path.mkdir(parents=True)
    repository.metadata_index_path.write_text("[]", encoding="utf-8")

    with pytest.raises(RepositoryError):
        repository.load_metadata_index()


def test_missing_metadata_schema_raises_repository_error(repository):
    repository.path.mkdir(parents=True)
    repository.structure_path.write_text("{}", encoding="utf-8")

    with pytest.raises(RepositoryError, match="does not exist"):
        repository.load_metadata_schema()


@pytest.mark.parametrize("folder", ["..", "../outside", "a/../../b"])
def test_rejects_traversal_in_folder_name(tmp_path: Path, folder):
    with pytest.raises(PathValidationError):
        SubmoduleRepository(tmp_path, folder)


def test_rejects_traversal_in_instance_name(repository):
    with pytest.raises(PathValidationError):
        repository.save_instance("../escape", {})


def test_rejects_absolute_folder_name(tmp_path: Path):
    outside = tmp_path.parent / "outside_folder"

    with pytest.raises(PathValidationError, match="must be relative"):
        SubmoduleRepository(tmp_path / "root", str(outside))


def test_rejects_absolute_instance_name(tmp_path: Path):
    repository = SubmoduleRepository(tmp_path / "root", "products")
    outside = tmp_path / "outside_instance"

    with pytest.raises(PathValidationError):
        repository.save_instance(str(outside), {"name": "x"})
    assert not outside.exists()


def test_rejects_folder_symlink_leaving_root(tmp_path: Path):
    root = tmp_path / "root"
    root.mkdir()
    (tmp_path / "elsewhere").mkdir()
    (root / "link").symlink_to(tmp_path / "elsewhere", target_is_directory=True)

    with pytest.raises(PathValidationError, match="outside"):
        SubmoduleRepository(root, "link")


def test_relative_root_with_parent_segment_is_allowed(tmp_path: Path, monkeypatch):
    (tmp_path / "work").mkdir()
    monkeypatch.chdir(tmp_path / "work")

    repository = SubmoduleRepository(Path("../data"), "products")
    repository.save_instance("w1", {"name": "one"})

    assert (tmp_path / "data" / "products" / "w1" / "info.json").is_file()
