"""
watorsim: Wa-Tor predator-prey cellular automaton

Fish and sharks share a toroidal ocean of cells. Each chronon every
occupant moves, eats, breeds or starves according to fixed local rules:

- Fish wander into empty water and breed after enough chronons
- Sharks hunt adjacent fish, otherwise wander like fish
- Sharks that go too long without eating starve
- The run ends when the last shark dies
"""

__version__ = "0.1.0"
