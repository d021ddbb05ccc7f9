"""File, directory and shell-command helpers."""

from __future__ import annotations

import os
import shlex
import shutil
import subprocess
from collections.abc import Iterable
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def _require_exists(path: Path, what: str = "file/directory") -> None:
    if not path.exists():
        raise FileNotFoundError(f"The {what} {path.name!r} does not exist.")


# File handling


def file_name(file_path: PathLike) -> Path:
    """The final component of ``file_path``."""
    return Path(Path(file_path).name)


def file_exists(file_path: PathLike) -> bool:
    """Whether anything exists at ``file_path``."""
    return Path(file_path).exists()


def file_is_empty(file_path: PathLike) -> bool:
    """Whether a file has no content or a directory has no entries."""
    path = Path(file_path)
    _require_exists(path)
    if path.is_dir():
        return not any(path.iterdir())
    return path.stat().st_size == 0


def clear_file(file_path: PathLike) -> None:
    """Truncate an existing file to zero length."""
    path = Path(file_path)
    _require_exists(path, "file")
    os.truncate(path, 0)


def delete_file(file_path: PathLike) -> bool:
    """Remove a file or an empty directory."""
    path = Path(file_path)
    _require_exists(path)
    if path.is_dir() and not path.is_symlink():
        path.rmdir()
    else:
        path.unlink()
    return True


def move_file(from_file_path: PathLike, to_dir_path: PathLike) -> None:
    """Move a file into the directory ``to_dir_path``."""
    source = Path(from_file_path)
    _require_exists(source, "file")
    os.replace(source, Path(to_dir_path) / source.name)


def copy_file(from_file_path: PathLike, to_dir_path: PathLike) -> None:
    """Copy a file into ``to_dir_path``, creating it if needed and overwriting any existing copy."""
    source = Path(from_file_path)
    _require_exists(source, "file")
    target_dir = Path(to_dir_path)
    if not target_dir.exists():
        target_dir.mkdir(parents=True)
    shutil.copyfile(source, target_dir / source.name)


# Directory handling


def is_directory(path: PathLike) -> bool:
    """Whether ``path`` is an existing directory."""
    return Path(path).is_dir()


def directory_exists(dir_path: PathLike) -> bool:
    """Whether ``dir_path`` exists and is a directory."""
    return file_exists(dir_path) and is_directory(dir_path)


def clear_directory(dir_path: PathLike) -> None:
    """Remove everything inside ``dir_path``, keeping the directory itself."""
    for entry in Path(dir_path).iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()


def create_directory(dir_path: PathLike, clear_if_exists: bool = False) -> None:
    """Create a directory whose parent exists, optionally emptying it if it already exists."""
    path = Path(dir_path)
    if not directory_exists(path.parent):
        raise FileNotFoundError(
            f"The parent directory of the given path {path.name!r} does not exist."
        )
    path.mkdir(exist_ok=True)
    if clear_if_exists:
        clear_directory(path)


def create_directories(dir_path: PathLike) -> None:
    """Create a directory and any missing parents."""
    Path(dir_path).mkdir(parents=True, exist_ok=True)


def directory_is_empty(dir_path: PathLike) -> bool:
    """Whether an existing directory has no entries."""
    path = Path(dir_path)
    if not directory_exists(path):
        raise FileNotFoundError(f"The directory {path.name!r} does not exist.")
    return file_is_empty(path) and is_directory(path)


def delete_directory(dir_path: PathLike) -> bool:
    """Remove a directory and everything in it."""
    clear_directory(dir_path)
    return delete_file(dir_path)


def copy_directory(from_dir_path: PathLike, to_dir_path: PathLike) -> None:
    """Copy a directory recursively into ``to_dir_path``, overwriting existing files."""
    source = Path(from_dir_path)
    if not directory_exists(source):
        raise FileNotFoundError(f"The directory {source.name!r} does not exist.")
    target_dir = Path(to_dir_path)
    target_dir.mkdir(parents=True, exist_ok=True)
    shutil.copytree(source, target_dir / source.name, dirs_exist_ok=True)


def move_directory(from_dir_path: PathLike, to_dir_path: PathLike) -> None:
    """Move a directory into ``to_dir_path`` by copying and then deleting it."""
    copy_directory(from_dir_path, to_dir_path)
    delete_directory(from_dir_path)


# Shell commands


def run_command(cmd: str, show_output: bool = False) -> int:
    """Run ``cmd`` in the shell and return its exit status."""
    stdout = None if show_output else subprocess.DEVNULL
    return subprocess.run(cmd, shell=True, stdout=stdout, check=False).returncode


def run_command_from(cmd: str, dir_path: PathLike, show_output: bool = False) -> int:
    """Run ``cmd`` in the shell from the directory ``dir_path``."""
    if not is_directory(dir_path):
        raise NotADirectoryError("The given path must be a directory.")
    stdout = None if show_output else subprocess.DEVNULL
    return subprocess.run(
        cmd, shell=True, cwd=os.fspath(dir_path), stdout=stdout, check=False
    ).returncode


def run_commands(cmds: Iterable[str], show_output: bool = False) -> None:
    """Run each command in turn."""
    for cmd in cmds:
        run_command(cmd, show_output)


def run_commands_from(cmds: Iterable[str], dir_path: PathLike, show_output: bool = False) -> None:
    """Run each command in turn from the directory ``dir_path``."""
    for cmd in cmds:
        run_command_from(cmd, dir_path, show_output)


def command_exists(cmd: str) -> bool:
    """Whether the program ``cmd`` can be found on the search path."""
    if " " in cmd:
        raise ValueError(f"Cannot have spaces in the command: {cmd}")
    return shutil.which(cmd) is not None


def compile_tex_file(tex_compiler: str, tex_path: PathLike, show_output: bool = False) -> int:
    """Compile a .tex file with ``tex_compiler`` from the file's own directory."""
    if not command_exists(tex_compiler):
        raise FileNotFoundError(
            f"Please install {tex_compiler} to compile a .tex file or use a different compiler."
        )
    path = Path(tex_path)
    if path.suffix != ".tex":
        raise ValueError(f"The given file has the extension {path.suffix!r}. Expected a .tex file.")
    return run_command_from(f"{tex_compiler} {shlex.quote(path.name)}", path.parent, show_output)


def convert_pdf_to_png(pdf_path: PathLike, pixel_density: int = 600, show_output: bool = False) -> Path:
    """Convert a .pdf file to a .png file beside it and return the .png path."""
    if not command_exists("convert"):
        raise FileNotFoundError("Please install Magick to convert a .pdf file to a .png file.")
    pdf = Path(pdf_path)
    if pdf.suffix != ".pdf":
        raise ValueError(f"The given file has the extension {pdf.suffix!r}. Expected a .pdf file.")
    png = pdf.with_suffix(".png")
    cmd = (
        f"convert -density {pixel_density} {shlex.quote(str(pdf))}"
        f" -channel RGBA  -colorspace sRGB PNG32:{shlex.quote(str(png))}"
    )
    run_command(cmd, show_output)
    return png