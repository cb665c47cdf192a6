"""
tablesql - Dialect-aware schema SQL rendering
Copyright © 2025 Ilona Tag

This file is part of tablesql.

tablesql is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as
published by the Free Software Foundation, either version 3 of
the License, or (at your option) any later version.

tablesql is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with tablesql. If not, see <https://www.gnu.org/licenses/>.

Contact: <https://github.com/elevata-labs/elevata>.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from tablesql.utils.env import env_str

"""
Profile loading for tablesql.

Profiles define environment-specific rendering defaults, currently the
SQL dialect used when a caller does not name one explicitly.
"""

PROFILES_FILE_NAME = "tablesql_profiles.yaml"


@dataclass
class Profile:
  name: str

  # Dialect used for SQL rendering (unless env override)
  default_dialect: str


def _find_profiles_path(explicit_path: str | None = None) -> Path:
  """
  Locate tablesql_profiles.yaml:

  1. explicit_path argument (if provided and exists)
  2. TABLESQL_PROFILES_PATH env var (if set and exists)
  3. ./config/tablesql_profiles.yaml relative to the CWD

  Raises:
      FileNotFoundError: if no suitable file can be found.
  """
  candidates: list[Path] = []

  if explicit_path:
    candidates.append(Path(explicit_path))

  env_path = env_str("TABLESQL_PROFILES_PATH")
  if env_path:
    candidates.append(Path(env_path))

  candidates.append(Path.cwd() / "config" / PROFILES_FILE_NAME)

  for c in candidates:
    if c.exists():
      return c

  raise FileNotFoundError(
    f"{PROFILES_FILE_NAME} not found in expected locations. "
    "Provide an explicit path or configure TABLESQL_PROFILES_PATH."
  )


def load_profile(profiles_path: Optional[str] = None) -> Profile:
  """
  Load and return the current active profile.

  Resolution order:
    - TABLESQL_PROFILE env var
    - `active_profile` key in tablesql_profiles.yaml
    - default 'dev'

  Raises:
      FileNotFoundError: if no profiles file can be found.
      KeyError: if the active profile is not defined.
      ValueError: if the file or its `profiles` key is not a mapping.
      yaml.YAMLError: if the file is not valid YAML.
  """
  path = _find_profiles_path(profiles_path)

  with open(path, "r") as f:
    data = yaml.safe_load(f) or {}

  if not isinstance(data, dict):
    raise ValueError(
      f"{PROFILES_FILE_NAME} at {path} must contain a mapping, "
      f"got {type(data).__name__}."
    )

  active = env_str("TABLESQL_PROFILE", data.get("active_profile", "dev"))
  profiles = data.get("profiles") or {}
  if not isinstance(profiles, dict):
    raise ValueError(
      f"'profiles' in {PROFILES_FILE_NAME} at {path} must be a mapping, "
      f"got {type(profiles).__name__}."
    )

  if active not in profiles:
    available = ", ".join(sorted(profiles)) if profiles else "(none)"
    raise KeyError(
      f"Active profile '{active}' not found in {PROFILES_FILE_NAME} "
      f"at {path}. Available profiles: {available}."
    )

  p = profiles[active] or {}

  return Profile(
    name=active,
    default_dialect=p.get("default_dialect", "sqlite"),
  )
