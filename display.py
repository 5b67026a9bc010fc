from replacement import Algorithm

ALGORITHM_LABELS = {
    Algorithm.FIFO: "FIFO",
    Algorithm.LRU: "LRU",
    Algorithm.MFU: "MFU",
}


def algorithm_label(algorithm):
    return ALGORITHM_LABELS[Algorithm.parse(algorithm)]


def describe_creation(page_table):
    return (f"Created page_table{{page_count={page_table.page_count}, "
            f"frame_count={page_table.frame_count}, "
            f"replacement_algorithm={algorithm_label(page_table.algorithm)}}}")


def format_contents(page_table):
    lines = [f"{'page':>4} {'frame':>5} | {'resident':>8}"]
    for entry in page_table.entries:
        lines.append(f"{entry.page_number:>4} {entry.frame_number:>5} | {int(entry.resident):>8}")
    return "\n".join(lines)


def format_table(page_table):
    """
    Algorithm, fault count and the per-page contents of the table.
    """
    return (f"==== Page Table ====\n"
            f"Mode : {algorithm_label(page_table.algorithm)}\n"
            f"Page Faults : {page_table.faults}\n"
            f"{format_contents(page_table)}")


def display(page_table):
    print(format_table(page_table))


def display_contents(page_table):
    print(format_contents(page_table))
