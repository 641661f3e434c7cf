"""
Binary Tree Demo -- Construction and rendering, reinsertion-based removal,
height under sorted vs. shuffled input, and the cost profile of removals.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_tree import BinaryTree, PassType, StringFormat

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

SAMPLE_VALUES = [6, 5, 3, 8, 1, 4, 9, 15, 17, 13, 7]
HEIGHT_SIZES = [8, 16, 32, 64, 128, 256]
HEIGHT_TRIALS = 20


def draw_tree(ax, tree, title, highlight=None):
    """Lay nodes out by in-order rank (x) and depth (y) and draw parent edges."""
    nodes = tree.nodes(PassType.HYBRID_ORDER)
    positions = {id(node): (rank, -node.depth()) for rank, node in enumerate(nodes)}

    for node in nodes:
        parent = node.parent
        if parent is None:
            continue
        x0, y0 = positions[id(parent)]
        x1, y1 = positions[id(node)]
        ax.plot([x0, x1], [y0, y1], color="gray", linewidth=1.2, zorder=1)

    for node in nodes:
        x, y = positions[id(node)]
        color = COLORS["red"] if highlight is not None and node.value == highlight else COLORS["blue"]
        ax.scatter([x], [y], s=520, color=color, edgecolors=COLORS["dark"], zorder=2)
        ax.text(x, y, str(node.value), ha="center", va="center",
                fontsize=9, color="white", fontweight="bold", zorder=3)

    ax.set_title(f"{title}\ncount={tree.size()}, height={tree.height()}", fontsize=11)
    ax.set_xlim(-1, max(len(nodes), 1))
    ax.set_ylim(-max(tree.height(), 1), 1)
    ax.axis("off")


# ---------------------------------------------------------------------------
# Example 1: Build and Inspect
# ---------------------------------------------------------------------------
def example_1_build_and_inspect():
    """Build the sample tree and print every traversal and both renderings."""
    print("=" * 60)
    print("Example 1: Build and Inspect")
    print("=" * 60)

    tree = BinaryTree(SAMPLE_VALUES)
    print(f"\n  Inserted: {SAMPLE_VALUES}")
    for order in PassType:
        print(f"  {order.name:<13} {tree.traverse(order)}")
    print(f"\n  Count:  {tree.size()}")
    print(f"  Height: {tree.height()}")
    print(f"  Min/Max: {tree.min()} / {tree.max()}")
    print(f"\n  Single line: {tree.to_string(StringFormat.SINGLE_LINE)}")
    print("  Indented:")
    for line in tree.to_string(StringFormat.INDENTED).splitlines():
        print(f"    {line}")

    fig, ax = plt.subplots(figsize=(9, 5))
    draw_tree(ax, tree, "Sample tree")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_build_and_inspect.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_build_and_inspect.png")


# ---------------------------------------------------------------------------
# Example 2: Removal by Reinsertion
# ---------------------------------------------------------------------------
def example_2_removal_by_reinsertion():
    """Show how removing inner nodes reshapes the tree depending on pass order."""
    print("\n" + "=" * 60)
    print("Example 2: Removal by Reinsertion")
    print("=" * 60)

    original = BinaryTree(SAMPLE_VALUES)

    after_nine = original.copy()
    removed = after_nine.remove_all(9, PassType.FLOORS_ORDER)
    print(f"\n  remove_all(9) removed {removed} node(s)")
    print(f"  Sorted: {after_nine.in_order()}")
    print(f"  Count: {after_nine.size()}, Height: {after_nine.height()}")

    root_floors = original.copy()
    root_floors.remove(6, PassType.FLOORS_ORDER)
    root_sorted = original.copy()
    root_sorted.remove(6, PassType.HYBRID_ORDER)
    print(f"\n  remove(6) in floors order -> height {root_floors.height()}")
    print(f"  remove(6) in hybrid order -> height {root_sorted.height()}")

    fig, axes = plt.subplots(2, 2, figsize=(14, 9))
    draw_tree(axes[0, 0], original, "Before", highlight=9)
    draw_tree(axes[0, 1], after_nine, "After remove_all(9)")
    draw_tree(axes[1, 0], root_floors, "remove(6), floors order")
    draw_tree(axes[1, 1], root_sorted, "remove(6), hybrid order")
    fig.suptitle("Removal rebuilds the detached subtree by reinsertion",
                 fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_removal_by_reinsertion.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_removal_by_reinsertion.png")


# ---------------------------------------------------------------------------
# Example 3: Height vs. Input Order
# ---------------------------------------------------------------------------
def example_3_height_vs_input_order():
    """Sorted input degenerates into a chain; shuffled input stays logarithmic."""
    print("\n" + "=" * 60)
    print("Example 3: Height vs. Input Order")
    print("=" * 60)

    sorted_heights = []
    shuffled_means = []
    shuffled_stds = []
    for n in HEIGHT_SIZES:
        sorted_heights.append(BinaryTree(range(n)).height())
        heights = np.array([
            BinaryTree(np.random.permutation(n).tolist()).height()
            for _ in range(HEIGHT_TRIALS)
        ])
        shuffled_means.append(heights.mean())
        shuffled_stds.append(heights.std())
        print(f"  n={n:<4} sorted={sorted_heights[-1]:<4} "
              f"shuffled={heights.mean():6.2f} +/- {heights.std():.2f}")

    sizes = np.array(HEIGHT_SIZES)
    fig, ax = plt.subplots(figsize=(9, 5.5))
    ax.plot(sizes, sorted_heights, "o-", color=COLORS["red"], label="sorted input")
    ax.errorbar(sizes, shuffled_means, yerr=shuffled_stds, fmt="s-",
                color=COLORS["blue"], capsize=4, label=f"shuffled input ({HEIGHT_TRIALS} trials)")
    ax.plot(sizes, np.log2(sizes) + 1, "--", color=COLORS["green"], label="log2(n) + 1")
    ax.set_xscale("log", base=2)
    ax.set_yscale("log", base=2)
    ax.set_xlabel("number of values")
    ax.set_ylabel("height (floors)")
    ax.legend()
    ax.grid(True, alpha=0.3)
    ax.set_title("Unbalanced insertion: height depends on input order",
                 fontsize=13, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_height_vs_input_order.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_height_vs_input_order.png")


# ---------------------------------------------------------------------------
# Example 4: Removal Cost Profile
# ---------------------------------------------------------------------------
def example_4_removal_cost():
    """Count how many values each single removal would have to reinsert."""
    print("\n" + "=" * 60)
    print("Example 4: Removal Cost Profile")
    print("=" * 60)

    values = np.random.randint(0, 500, size=200).tolist()
    tree = BinaryTree(values)
    reinserted = np.array([
        len(tree.traverse(PassType.FLOORS_ORDER, index)) - 1
        for index in range(tree.size())
    ])
    leaves = int(np.sum(reinserted == 0))
    print(f"\n  Nodes: {tree.size()}, height: {tree.height()}")
    print(f"  Leaf removals (no reinsertion): {leaves}")
    print(f"  Mean values reinserted: {reinserted.mean():.2f}")
    print(f"  Worst case (root): {reinserted.max()}")

    duplicates = BinaryTree([5, 5, 5, 3, 8])
    print(f"\n  Duplicates {duplicates.in_order()} -> remove_all(5) = {duplicates.remove_all(5)}, "
          f"left {duplicates.in_order()}")

    fig, axes = plt.subplots(1, 2, figsize=(13, 5))
    axes[0].hist(reinserted, bins=40, color=COLORS["purple"], edgecolor="white")
    axes[0].set_xlabel("values reinserted by remove()")
    axes[0].set_ylabel("nodes")
    axes[0].set_yscale("log")
    axes[0].set_title("Distribution over all nodes")

    depths = np.array([node.depth() for node in tree.nodes(PassType.FLOORS_ORDER)])
    axes[1].scatter(depths, reinserted, color=COLORS["orange"], alpha=0.7)
    axes[1].set_xlabel("node depth")
    axes[1].set_ylabel("values reinserted")
    axes[1].set_yscale("symlog")
    axes[1].set_title("Shallow nodes carry the largest subtrees")
    for ax in axes:
        ax.grid(True, alpha=0.3)
    fig.suptitle("Cost of reinsertion-based removal", fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_removal_cost.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/04_removal_cost.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Collect every visualization into a single PDF."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Unbalanced Binary Search Tree",
                fontsize=24, fontweight="bold", ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Duplicate-tolerant insertion and reinsertion-based removal",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "Equal values are routed into the left subtree. Removing an inner node\n"
            "detaches its whole subtree and inserts the remaining values again.\n\n"
            "This demo covers:\n"
            "  1. Building the sample tree, traversals and renderings\n"
            "  2. Removal by reinsertion and the effect of pass order\n"
            "  3. Height under sorted vs. shuffled input\n"
            "  4. How many values a removal reinserts\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.32, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_build_and_inspect.png": "Example 1: Build and Inspect",
            "02_removal_by_reinsertion.png": "Example 2: Removal by Reinsertion",
            "03_height_vs_input_order.png": "Example 3: Height vs. Input Order",
            "04_removal_cost.png": "Example 4: Removal Cost Profile",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Binary Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_build_and_inspect()
    example_2_removal_by_reinsertion()
    example_3_height_vs_input_order()
    example_4_removal_cost()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
