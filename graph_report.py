from typing import List

from graph_config import GraphConfig
from graph_model import GraphModel, Matrix

# ---------------------- Formatting ----------------------

def format_matrix(matrix: Matrix) -> List[str]:
    return [" ".join("1" if cell else "0" for cell in row) for row in matrix]


def print_matrix(title: str, matrix: Matrix) -> None:
    print(title)
    for line in format_matrix(matrix):
        print(line)


def print_degrees(title: str, model: GraphModel, directed: bool) -> None:
    print(title)
    for i, d in enumerate(model.degrees(directed)):
        print(f"Node {i}: {d}")


def print_half_degrees(title: str, model: GraphModel, labelled: bool = True) -> None:
    print(title)
    for i in range(model.n):
        entry, exit_ = model.half_degrees(i, directed=True)
        if labelled:
            print(f"Node {i}: entry - {entry}, exit - {exit_}")
        else:
            print(f"Node {i}: ({entry}, {exit_})")


# ---------------------- Report ----------------------

def print_info(model: GraphModel) -> None:
    print_matrix("Undirected graph:", model.undirected)
    print()
    print_matrix("Directed graph:", model.matrix)
    print()
    print_degrees("Undirected graph node powers:", model, directed=False)
    print()
    print_degrees("Directed graph node powers:", model, directed=True)
    print()
    print_half_degrees("Directed graph node halfpowers:", model)
    print()
    print("Graph is homogeneous" if model.is_homogeneous(directed=True) else "Graph is not homogeneous")
    print()
    print(f"Isolated nodes: {model.isolated_nodes(directed=True)}")
    print(f"Terminal nodes: {model.terminal_nodes(directed=True)}")


def run_startup_report(model: GraphModel, config: GraphConfig) -> None:
    """Print the initial graph, regenerate it with the updated density and print it again."""
    print_info(model)
    print()
    model.regenerate(config.updated_density)
    print_matrix("Updated directed graph:", model.matrix)
    print()
    print_half_degrees("Directed updated graph node halfpowers:", model, labelled=False)
