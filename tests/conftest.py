import pytest
from PySide6.QtCore import QCoreApplication

from pipelineplanner.app.state import Store
from pipelineplanner.model.edges import EdgeSet
from pipelineplanner.model.vertices import VertexSet


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def triangle():
    """A(0,0), B(10,0), C(10,10) with the separation check disabled."""
    vertices = VertexSet(min_separation=0)
    for x, y in [(0, 0), (10, 0), (10, 10)]:
        vertices.insert(x, y)
    return vertices, EdgeSet(vertices)


@pytest.fixture
def store():
    return Store()
