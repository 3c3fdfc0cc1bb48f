import pytest

from fwcs_sz6.Farmer_Wolf_Cabbage_Sheep_SZ6 import FWCS_Formulation, FWCS_State
from fwcs_sz6.engine.bfs_solver import BFSSolver


@pytest.fixture
def formulation():
    return FWCS_Formulation()


@pytest.fixture
def initial_state():
    return FWCS_State()


@pytest.fixture
def solver(formulation):
    s = BFSSolver(formulation)
    s.run_search()
    return s


@pytest.fixture
def result(solver):
    return solver.result
