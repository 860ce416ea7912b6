from graphviz import Digraph

# States of a robot while its program runs
STATES = ["running", "stopped_ok", "stopped_lost"]

# (source, transition, destination)
TRANSITIONS = [
    ("running", "turn", "running"),
    ("running", "move", "running"),
    ("running", "ignore_move", "running"),  # off-grid move from a scented point
    ("running", "program_exhausted", "stopped_ok"),
    ("running", "fall_off", "stopped_lost"),  # leaves a scent
]


def build_state_diagram():
    dot = Digraph("Robot_State_Machine", format="png")
    dot.attr(rankdir="LR", size="8,5")

    for s in STATES:
        shape = "doublecircle" if s.startswith("stopped") else "circle"
        dot.node(s, s, shape=shape)

    for src, transition, dst in TRANSITIONS:
        dot.edge(src, dst, label=transition)

    return dot


if __name__ == "__main__":
    dot = build_state_diagram()
    dot.render("robot_state_machine", view=True)
    print("State machine diagram saved to robot_state_machine.png")
