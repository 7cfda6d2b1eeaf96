import os
from vennsets import calculate, OPERATIONS

if __name__ == "__main__":
    os.makedirs("img/vennsets/", exist_ok=True)
    demo_inputs = {
        2: ["1, 2, 3", "2, 3, 4"],
        3: ["a, b, apple, kiwi, fig, plum, pear", "b, c, kiwi", "c, a, plum, lime"],
    }

    for N, texts in demo_inputs.items():
        for operation in OPERATIONS:
            print(
                f"Generating Venn diagram for "
                f"N={N} operation={operation} ..."
            )
            slug = operation.lower().replace(" ", "_")
            outfile = f"img/vennsets/N{N}_{slug}.png"
            outcome = calculate(
                texts,
                N,
                operation,
                outfile=outfile,
                dpi=150,
            )
            if outcome.error:
                print(outcome.error)
            else:
                print(outcome.report)

    # Labels colored against the blended fills instead of plain black
    calculate(
        demo_inputs[3],
        3,
        "Union",
        outfile="img/vennsets/N3_union_autocolor.png",
        text_color=None,
    )
