# main.py
import sys

from pathgraph.app.build import build


def run(width: int = 8, height: int = 6):
    astar = build({"name": "grid-demo", "search": {"cost_model": {"kind": "euclidean"}}})

    # Reuse a plain 4-connected grid; positions double as ids
    for x in range(width):
        for y in range(height):
            astar.add_point((x, y))
    for x in range(width):
        for y in range(height):
            if x + 1 < width:
                astar.connect_points((x, y), (x + 1, y))
            if y + 1 < height:
                astar.connect_points((x, y), (x, y + 1))

    # A wall with a single gap at the top
    for y in range(height - 1):
        astar.remove_point((width // 2, y))

    return astar.find_path((0, 0), (width - 1, 0))


if __name__ == "__main__":
    path = run()
    sys.stdout.write(" -> ".join(map(str, path)) + "\n")
