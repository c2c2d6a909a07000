import os
import numpy as np

OPERATORS = ["+", "-", "*", "/", "%", "^",
             "add", "sub", "mul", "div", "mod", "min", "max"]


def make_expr(rng, depth):
    if depth <= 0 or rng.random() < 0.3:
        # small integers keep ^ from overflowing and make /, % hit zero now and then
        return str(int(rng.integers(-4, 10)))
    op = OPERATORS[rng.integers(len(OPERATORS))]
    args = [make_expr(rng, depth - 1) for _ in range(rng.integers(1, 4))]
    return f"({op} {' '.join(args)})"


def make_programs(seed=0, n=200, max_depth=4):
    rng = np.random.default_rng(seed)
    programs = []
    for _ in range(n):
        op = OPERATORS[rng.integers(len(OPERATORS))]
        args = [make_expr(rng, max_depth - 1) for _ in range(rng.integers(1, 5))]
        programs.append(f"{op} {' '.join(args)}")
    return programs


if __name__ == "__main__":
    os.makedirs("data", exist_ok=True)
    with open("data/expressions.txt", "w", encoding="utf-8") as f:
        f.write("\n".join(make_programs()) + "\n")
    print("Synthetic expressions saved to ./data/expressions.txt")
