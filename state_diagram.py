from graphviz import Digraph

from utils import RoverState, Move

# Transitions (rectangles) with their arcs between states (circles)
TRANSITIONS = {
    "apply_move": [(RoverState.ACTIVE, RoverState.ACTIVE)],
    "leave_grid": [(RoverState.ACTIVE, RoverState.LOST)],
    "moves_exhausted": [(RoverState.ACTIVE, RoverState.FINISHED)],
}


def build_state_diagram():
    """Create the rover state machine as a directed graph"""
    dot = Digraph("Rover_State_Machine", format="png")
    dot.attr(rankdir="LR", size="8,5")

    for state in RoverState:
        shape = "circle" if state == RoverState.ACTIVE else "doublecircle"
        dot.node(state.value, state.value, shape=shape)

    for transition in TRANSITIONS:
        label = transition
        if transition == "apply_move":
            label = f"{transition}\n" + "/".join(m.value for m in Move)
        dot.node(transition, label, shape="box", style="filled", color="lightgray")

    for transition, arcs in TRANSITIONS.items():
        for src, dst in arcs:
            dot.edge(src.value, transition)
            dot.edge(transition, dst.value)

    return dot


def save_state_diagram(path):
    """Write the DOT source of the state machine to path"""
    dot = build_state_diagram()
    dot.save(path)
    return path
