'''fwcs_sz6
Breadth-first solver for the Farmer, Wolf, Cabbage and Sheep puzzle,
written as a SOLUZION6 formulation plus a search engine.
'''

__version__ = "1.0.0"
