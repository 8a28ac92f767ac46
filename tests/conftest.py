from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.repo_builder import RepoBuilder

SCENARIO_APP = """
import React from "react";

export const App: React.FC = () => {
  return <div>Hello World</div>;
};

export default App;
"""

SCENARIO_BUTTONS = """
import React from "react";

export const Button: React.FC<ButtonProps> = ({ label, onClick }) => {
  return <button onClick={onClick}>{label}</button>;
};

export const IconButton = () => <button>Icon</button>;
"""

SCENARIO_HEADER = """
import React from "react";

class Header extends React.Component {
  render() {
    return <header>My Header</header>;
  }
}

export default Header;
"""


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return RepoBuilder(tmp_path)


@pytest.fixture
def sample_repo(repo_builder: RepoBuilder) -> RepoBuilder:
    """Project holding the three reference component files."""
    repo_builder.write(
        {
            "src/App.tsx": SCENARIO_APP,
            "src/components/Button.tsx": SCENARIO_BUTTONS,
            "src/layout/Header.jsx": SCENARIO_HEADER,
        }
    )
    return repo_builder


@pytest.fixture(autouse=True)
def _reset_compscan_logging():
    """Drop handlers installed by CLI tests so later tests do not write to closed streams."""
    yield
    logger = logging.getLogger("compscan")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
