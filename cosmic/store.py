"""
File-backed profile store.

A computed profile is written to profile_data/<name>.json as the JSON form
of CosmicProfile.to_dict(). The directory defaults to profile_data/ at the
project root and can be moved with the COSMIC_PROFILE_DIR environment
variable or a per-call directory argument.

Usage from Python:
    from cosmic.store import save_profile, load_profile
    path = save_profile(profile)           # profile_data/cosmicbase_profile.json
    profile = load_profile()
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from cosmic.profile import CosmicProfile, profile_from_dict

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_KEY = "cosmicbase_profile"
PROFILE_DIR_ENV = "COSMIC_PROFILE_DIR"


def profile_dir(directory: Optional[Union[str, Path]] = None) -> Path:
    """Resolve the store directory: argument, then environment, then default."""
    if directory is not None:
        return Path(directory)
    from_env = os.environ.get(PROFILE_DIR_ENV)
    if from_env:
        return Path(from_env)
    return Path(__file__).parent.parent / "profile_data"


def profile_path(name: str = DEFAULT_PROFILE_KEY,
                 directory: Optional[Union[str, Path]] = None) -> Path:
    filename = name.lower().replace(" ", "_")
    if not filename or filename != Path(filename).name or filename in (".", ".."):
        raise ValueError(f"Invalid profile name: {name!r}")
    return profile_dir(directory) / f"{filename}.json"


def save_profile(profile: CosmicProfile, name: str = DEFAULT_PROFILE_KEY,
                 directory: Optional[Union[str, Path]] = None) -> Path:
    """
    Write a profile to <directory>/<name>.json, replacing any previous one.

    Returns:
        Path of the written file
    """
    path = profile_path(name, directory)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(profile.to_dict(), f, indent=2, ensure_ascii=False)

    logger.info("Saved profile %r to %s", profile.title, path)
    return path


def load_profile(name: str = DEFAULT_PROFILE_KEY,
                 directory: Optional[Union[str, Path]] = None) -> CosmicProfile:
    """
    Load a profile saved by save_profile().

    Raises:
        FileNotFoundError: if no profile is stored under this name
        ValueError: if the file is not a valid stored profile
    """
    path = profile_path(name, directory)
    if not path.exists():
        raise FileNotFoundError(f"No profile stored for '{name}' at {path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Stored profile at {path} is not valid JSON: {e}") from e

    profile = profile_from_dict(data)
    logger.debug("Loaded profile %r from %s", profile.title, path)
    return profile


def delete_profile(name: str = DEFAULT_PROFILE_KEY,
                   directory: Optional[Union[str, Path]] = None) -> bool:
    """Remove a stored profile. Returns False if there was nothing to remove."""
    path = profile_path(name, directory)
    if not path.exists():
        return False
    path.unlink()
    logger.info("Deleted stored profile %s", path)
    return True
