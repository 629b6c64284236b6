import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import dictation_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from dictation_toolkit.core.models.gaps import Gap
from dictation_toolkit.scoring.config import ScoringConfig, Weighting


# Common test fixtures
@pytest.fixture
def sample_transcript():
    """Transcript with one single-answer and one multi-answer gap."""
    return "The [cat] sat on the [mat, rug]."


@pytest.fixture
def sample_gaps():
    return [Gap(0, ("cat",)), Gap(1, ("mat", "rug"))]


@pytest.fixture
def similarity_uniform():
    return ScoringConfig.similarity(weighting=Weighting.UNIFORM)


@pytest.fixture
def exact_uniform():
    return ScoringConfig.exact()
