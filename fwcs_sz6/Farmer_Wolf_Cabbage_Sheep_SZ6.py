'''Farmer_Wolf_Cabbage_Sheep_SZ6.py
("Farmer, Wolf, Cabbage and Sheep" river-crossing puzzle)

SOLUZION6 formulation.

A farmer stands on the left bank of a river with a wolf, a sheep and a
cabbage.  The boat holds the farmer and at most one passenger.  Left
alone without the farmer, the wolf eats the sheep and the sheep eats
the cabbage.  The goal is to bring everybody over to the right bank.

Moves are written as tokens naming who crosses:
  F   farmer alone
  FW  farmer and wolf
  FS  farmer and sheep
  FC  farmer and cabbage
'''

SOLUZION_VERSION = 6

from . import soluzion6 as sz

# ---------------------------------------------------------------------------
# GLOBAL CONSTANTS
# ---------------------------------------------------------------------------

FARMER  = 'F'
WOLF    = 'W'
SHEEP   = 'S'
CABBAGE = 'C'

LEFT  = 'left'
RIGHT = 'right'

# Order in which the occupants stand on the left bank at the start.
# describe() keeps insertion order, so this fixes the printed form.
INITIAL_LEFT_BANK = (WOLF, SHEEP, CABBAGE, FARMER)
OCCUPANTS = frozenset(INITIAL_LEFT_BANK)

# The four legal boat loads, in the order the solver tries them.
MOVES = ('F', 'FW', 'FS', 'FC')

MOVE_DESCRIPTIONS = {
    'F':  "Farmer crosses alone",
    'FW': "Farmer crosses with the wolf",
    'FS': "Farmer crosses with the sheep",
    'FC': "Farmer crosses with the cabbage",
}

# Pairs that may not share a bank unless the farmer is there too.
UNSAFE_PAIRS = (
    frozenset((WOLF, SHEEP)),
    frozenset((SHEEP, CABBAGE)),
)


def opposite(bank):
    return RIGHT if bank == LEFT else LEFT


def bank_is_safe(occupants):
    '''True if no unsafe pair is left on this bank without the farmer.'''
    present = set(occupants)
    if FARMER in present:
        return True
    return not any(pair <= present for pair in UNSAFE_PAIRS)

# ---------------------------------------------------------------------------
# METADATA
# ---------------------------------------------------------------------------

class FWCS_Metadata(sz.SZ_Metadata):
    def __init__(self):
        self.name             = "Farmer, Wolf, Cabbage and Sheep"
        self.soluzion_version = SOLUZION_VERSION
        self.problem_version  = "1.0"
        self.authors          = ['Ng Chiang Lin']
        self.creation_date    = "2017-May"
        self.brief_desc = (
            "A farmer has to ferry a wolf, a sheep and a cabbage across a "
            "river in a boat that carries only the farmer and one passenger. "
            "The wolf may not be left alone with the sheep, nor the sheep "
            "with the cabbage."
        )

# ---------------------------------------------------------------------------
# STATE
# ---------------------------------------------------------------------------

class FWCS_State(sz.SZ_State):
    '''Placement of the four occupants on the two banks.

    active_bank  -- LEFT or RIGHT, where the farmer (and the boat) is.
    left, right  -- tuples of occupant tokens, in the order they arrived.

    States are never modified once built; transition() makes fresh
    copies of both banks.
    '''

    def __init__(self, active_bank=LEFT, left=INITIAL_LEFT_BANK, right=()):
        self.active_bank = active_bank
        self.left  = tuple(left)
        self.right = tuple(right)
        self._check()

    def _check(self):
        if self.active_bank not in (LEFT, RIGHT):
            raise ValueError(f"Unknown bank: {self.active_bank!r}")
        everyone = self.left + self.right
        if len(everyone) != len(OCCUPANTS) or set(everyone) != OCCUPANTS:
            raise ValueError(
                f"Banks must split {sorted(OCCUPANTS)} between them, "
                f"got L={self.left} R={self.right}")
        if FARMER not in self.bank(self.active_bank):
            raise ValueError(
                f"Farmer is not on the {self.active_bank} bank")

    def bank(self, side):
        return self.left if side == LEFT else self.right

    def __str__(self):
        return "{L:" + "".join(self.left) + " R:" + "".join(self.right) + "}"

    def __repr__(self):
        return f"FWCS_State({self.active_bank!r}, {self.left!r}, {self.right!r})"

    def describe(self):
        return str(self)

    def __eq__(self, s2):
        if not isinstance(s2, FWCS_State):
            return False
        return (self.active_bank == s2.active_bank and
                set(self.left)  == set(s2.left) and
                set(self.right) == set(s2.right))

    def __hash__(self):
        return hash((self.active_bank, frozenset(self.left), frozenset(self.right)))

    # -- Move legality --

    def can_move(self, move):
        '''Return True if everybody named in move is on the farmer's bank.'''
        here = self.bank(self.active_bank)
        return all(token in here for token in move)

    # -- Move application --

    def transition(self, move):
        '''Return the state reached by ferrying the occupants named in
        move to the other bank, or None if one of them is not on the
        farmer's bank.  The safety rules are not checked here.'''
        src = list(self.bank(self.active_bank))
        dst = list(self.bank(opposite(self.active_bank)))
        for token in move:
            if token not in src:
                return None
            src.remove(token)
            dst.append(token)
        if self.active_bank == LEFT:
            return FWCS_State(RIGHT, left=src, right=dst)
        return FWCS_State(LEFT, left=dst, right=src)

    # -- Constraints and goal --

    def is_allowed(self):
        '''Neither bank leaves the wolf with the sheep or the sheep with
        the cabbage unattended.'''
        return bank_is_safe(self.left) and bank_is_safe(self.right)

    def is_goal(self):
        '''Everybody, farmer included, is on the right bank.'''
        return not self.left and set(self.right) == OCCUPANTS

    is_solved = is_goal

# ---------------------------------------------------------------------------
# OPERATORS
# ---------------------------------------------------------------------------

class FWCS_Operator_Set(sz.SZ_Operator_Set):
    '''One operator per move token, in the fixed order of MOVES.'''

    def __init__(self):
        self.operators = [
            sz.SZ_Operator(
                name=move,
                description=MOVE_DESCRIPTIONS[move],
                precond_func=lambda s, m=move: s.can_move(m),
                state_xition_func=lambda s, m=move: s.transition(m)
            )
            for move in MOVES
        ]

# ---------------------------------------------------------------------------
# FORMULATION
# ---------------------------------------------------------------------------

class FWCS_Formulation(sz.SZ_Formulation):
    def __init__(self):
        super().__init__(metadata=FWCS_Metadata(),
                         operators=FWCS_Operator_Set())

    def initialize_problem(self, config=None):
        initial_state = FWCS_State()
        self.instance_data = sz.SZ_Problem_Instance_Data(
            d={'initial_state': initial_state}
        )
        return initial_state

    def describe_move(self, op, new_state):
        return f"{op.name} moves {new_state.active_bank}"

# ---------------------------------------------------------------------------
# MODULE-LEVEL ENTRY POINT
# ---------------------------------------------------------------------------

FWCS = FWCS_Formulation()
