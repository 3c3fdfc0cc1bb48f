'''soluzion6.py
Problem-formulation abstractions in the SOLUZION6 manner.

Each class here is intended to be subclassed by a concrete problem
formulation (see Farmer_Wolf_Cabbage_Sheep_SZ6.py).  A formulation
bundles metadata, an operator set and a way of building the initial
state; search engines (see engine/bfs_solver.py) only talk to the
formulation through these classes.

Unlike the interactive SOLUZION engines, a search engine tries every
operator on every state, so a state-transition function is allowed
to return None to say "this move cannot be made from here".
'''


class SZ_Metadata:
    '''A component of a formulation'''
    def __init__(self):
        self.name = "Base Problem"
        self.problem_version = "0.0"
        self.authors = []
        self.creation_date = ""
        self.brief_desc = ""


class SZ_Problem_Instance_Data:
    '''Data particular to the current problem instance, such as
    its initial state.'''
    def __init__(self, d=None):
        self.data = d if d is not None else {}


class SZ_State:
    '''Prototype state for puzzles, with defaults for the
    predicates a search engine asks about.'''

    def is_goal(self):
        return False

    def is_allowed(self):
        return True

    def describe(self):
        return str(self)


class SZ_Operator:
    '''One move of a formulation.

    precond_func(state) says whether the move may be tried at all;
    state_xition_func(state) returns the new state, or None when the
    move turns out not to apply.'''

    def __init__(self,
                 name,
                 description="",
                 precond_func=lambda state: True,
                 state_xition_func=None):
        self.name = name
        self.description = description or name
        self.precond_func = precond_func
        self.state_xition_func = state_xition_func

    def apply(self, state):
        '''Return the successor of state, or None if the operator
        does not apply.'''
        if not self.precond_func(state):
            return None
        return self.state_xition_func(state)

    def __repr__(self):
        return f"SZ_Operator({self.name!r})"


class SZ_Operator_Set:
    '''Ordered collection of operators.
    Instantiated in a Problem formulation.'''

    def __init__(self, operators=None):
        self.operators = list(operators) if operators else []


class SZ_Formulation:
    '''An encapsulation of a problem formulation.'''

    def __init__(self, metadata=None, operators=None):
        self.metadata = metadata if metadata is not None else SZ_Metadata()
        self.operators = operators if operators is not None else SZ_Operator_Set()
        self.instance_data = None

    def initialize_problem(self, config=None):
        '''Set up the problem instance data and return the initial state.'''
        initial_state = SZ_State()
        self.instance_data = SZ_Problem_Instance_Data(
            d={'initial_state': initial_state})
        return initial_state

    def describe_move(self, op, new_state):
        '''Human-readable label for the move op that produced new_state.'''
        return op.name
