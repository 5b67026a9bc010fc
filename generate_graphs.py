import sys

import matplotlib.pyplot as plt

from data_loader import load_test_data
from display import algorithm_label
from simulator import ALGORITHMS, compare_algorithms


def plot_fault_comparison(data_files, output='algorithm_comparison.png'):
    results = {}
    for data_file in data_files:
        results[data_file] = compare_algorithms(load_test_data(data_file), ALGORITHMS)

    fig, ax = plt.subplots(figsize=(8, 5))
    fig.suptitle('Page Replacement Algorithm Comparison', fontsize=14, fontweight='bold')

    x = range(len(ALGORITHMS))
    width = 0.8 / len(data_files)

    for idx, data_file in enumerate(data_files):
        faults = [results[data_file][alg] for alg in ALGORITHMS]
        offset = (idx - (len(data_files) - 1) / 2) * width
        bars = ax.bar([i + offset for i in x], faults, width, label=data_file)
        for bar in bars:
            height = bar.get_height()
            ax.text(bar.get_x() + bar.get_width()/2., height,
                    f'{int(height)}', ha='center', va='bottom', fontsize=9)

    ax.set_title('Page Faults')
    ax.set_xticks(list(x))
    ax.set_xticklabels([algorithm_label(alg) for alg in ALGORITHMS])
    ax.grid(axis='y', alpha=0.3)
    ax.legend(loc='upper right', frameon=True)

    plt.tight_layout()
    plt.savefig(output, dpi=300, bbox_inches='tight')
    plt.close(fig)
    return results


def main(argv=None):
    data_files = sys.argv[1:] if argv is None else argv
    if not data_files:
        print("Usage: generate_graphs.py <trace-file> [<trace-file> ...]")
        return 1
    print("Running simulations...")
    plot_fault_comparison(data_files)
    print("\nGraph saved as 'algorithm_comparison.png'")
    return 0


if __name__ == '__main__':
    sys.exit(main())
