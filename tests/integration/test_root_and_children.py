import os

import pytest

from pathio import InvalidChildNameError, PathNode, PathNotFoundError, new_root


def test_new_root_keeps_path_exactly(tmp_path):
    expected = str(tmp_path)
    root = new_root(expected)
    assert root.here == expected
    assert os.fspath(root) == expected


def test_new_root_nonexistent_raises(tmp_path):
    with pytest.raises(PathNotFoundError):
        new_root(str(tmp_path / "missing"))


def test_new_root_empty_path_raises():
    with pytest.raises(PathNotFoundError):
        new_root("")


def test_path_not_found_is_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        new_root(str(tmp_path / "missing"))


def test_root_has_no_parent(path_root):
    assert path_root.parent is None


def test_root_relative_is_base_name(tmp_path):
    root = new_root(str(tmp_path))
    assert root.relative == os.path.basename(str(tmp_path))


def test_root_dir_exists(path_root):
    assert path_root.dir_exists()


def test_new_root_discovers_existing_tree(tmp_path):
    (tmp_path / "a" / "x").mkdir(parents=True)
    (tmp_path / "b").mkdir()
    (tmp_path / "file.txt").write_text("data")
    root = new_root(str(tmp_path))
    assert {c.relative for c in root.children()} == {"a", "b"}
    assert root.find("a/x").here == str(tmp_path / "a" / "x")


def test_symlinked_dirs_are_not_followed(tmp_path):
    (tmp_path / "real").mkdir()
    os.symlink(tmp_path, tmp_path / "real" / "loop")
    root = new_root(str(tmp_path))
    assert root.find("real/loop") is None


def test_empty_root_has_no_children(path_root):
    assert not path_root.has_children()
    assert path_root.children() == []


def test_create_child_makes_directory(path_root):
    child = path_root.create_child("sub")
    assert child.dir_exists()
    assert os.path.isdir(child.here)
    assert child.here == os.path.join(path_root.here, "sub")


def test_create_child_updates_children(path_root):
    path_root.create_child("sub")
    assert path_root.has_children()
    assert len(path_root.children()) == 1


def test_create_child_is_idempotent(path_root):
    first = path_root.create_child("sub")
    second = path_root.create_child("sub")
    assert first is second


def test_create_child_existing_dir_is_kept(path_root, tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "keep.txt").write_text("x")
    child = path_root.create_child("sub")
    assert child.files() == ["keep.txt"]


def test_create_many_children(path_root):
    for i in range(10):
        path_root.create_child(f"_{i}")
    assert len(path_root.children()) == 10


def test_child_parent_and_relative(path_root):
    child = path_root.create_child("temp")
    assert child.parent is path_root
    assert child.relative == "temp"


def test_attach_child_is_idempotent(path_root):
    assert path_root.attach_child("sub") is path_root.attach_child("sub")


def test_attach_child_does_not_create_directory(path_root):
    child = path_root.attach_child("sub")
    assert not child.dir_exists()
    assert not os.path.exists(child.here)


def test_attach_child_discovers_subdirectories(disk_root):
    sub = os.path.join(disk_root.here, "temp")
    os.mkdir(sub)
    for i in range(10):
        os.mkdir(os.path.join(sub, f"_{i}"))
    child = disk_root.attach_child("temp")
    assert child.relative == "temp"
    assert len(child.children()) == 10


def test_attach_rejects_path_names(path_root):
    with pytest.raises(InvalidChildNameError):
        path_root.attach_child("a/b")


def test_find_child_before_and_after_create(path_root):
    assert path_root.find_child("temp") is None
    path_root.create_child("temp")
    found = path_root.find_child("temp")
    assert found is not None
    assert found.relative == "temp"


def test_create_children_chain(path_root, tmp_path):
    leaf = path_root.create_children("a", "b", "c")
    assert leaf.here == str(tmp_path / "a" / "b" / "c")
    assert (tmp_path / "a" / "b" / "c").is_dir()
    assert leaf.parent.parent.parent is path_root
    assert path_root.find("a/b/c") is leaf


def test_create_children_without_names_returns_self(path_root):
    assert path_root.create_children() is path_root


def test_dir_exists_true_for_files(path_root):
    with open(path_root.file_name("plain"), "wb"):
        pass
    node = path_root.attach_child("other")
    assert not node.dir_exists()
    assert PathNode(path_root.file_name("plain")).dir_exists()
