#!/usr/bin/env python3
"""
Engine walkthrough for memengine

Plays the part of the orchestrator: owns one instance of every structure and
drives it the way a gym-management front end would.
- Member lookup through HashTable, LinearProbingHash and BPlusTree
- Appointment scheduling with MinHeap, walk-ins with Queue, undo with Stack
- Browsing history with DoubleLinkedList and XORLinkedList
- Equipment dependencies with Graph (BFS, DFS, SCC)
- Name search with KMP and report compression with Huffman
- Floor plan with SparseMatrix

Run with: python examples/engine_demo.py
"""

import logging
import sys

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from memengine import (
    BPlusTree, DoubleLinkedList, EmptyCollectionError, Graph, HashTable,
    HuffmanCoding, KMPAlgorithm, LinearProbingHash, MinHeap, Queue,
    SparseMatrix, Stack, XORLinkedList, configure_logging,
)

console = Console()

MEMBERS = [
    (1042, "Ada Lovelace"),
    (1007, "Alan Turing"),
    (1099, "Grace Hopper"),
    (1013, "Barbara Liskov"),
    (1071, "Edsger Dijkstra"),
    (1055, "Donald Knuth"),
]


def print_header(title: str, subtitle: str = ""):
    """Print a header panel"""
    full_title = f"[bold blue]{title}[/bold blue]"
    if subtitle:
        full_title += f"\n[dim]{subtitle}[/dim]"
    console.print(Panel(full_title, style="bright_blue", box=box.DOUBLE, padding=(1, 2)))


def print_step(step_num: int, title: str, description: str = ""):
    step_text = f"[bold yellow]Step {step_num}: {title}[/bold yellow]"
    if description:
        step_text += f"\n[dim italic]{description}[/dim italic]"
    console.print(step_text)
    console.print()


def print_success(message: str):
    console.print(f"[bold green]✓[/bold green] {message}")


def print_info(message: str):
    console.print(f"[bold cyan]ℹ[/bold cyan] {message}")


def demonstrate_indexes():
    print_step(1, "Member indexes",
               "The same members go into three indexes; keeping them in step is our job")

    table_index = HashTable()
    probe_index = LinearProbingHash()
    tree_index = BPlusTree()

    for member_id, name in MEMBERS:
        table_index.put(member_id, name)
        probe_index.put(member_id, name)
        tree_index.insert(member_id, name)

    table = Table(title="Index state", box=box.ROUNDED)
    table.add_column("Index", style="cyan")
    table.add_column("Size", justify="right", style="green")
    table.add_column("Details", style="white")
    table.add_row("HashTable", str(table_index.size()), repr(table_index))
    table.add_row("LinearProbingHash", str(probe_index.size()), repr(probe_index))
    table.add_row("BPlusTree", str(tree_index.size()), repr(tree_index))
    console.print(table)

    print_info(f"Lookup 1099 → {table_index.get(1099)}")
    print_info(f"Members 1010..1060 → {tree_index.range_search(1010, 1060)}")
    print_success("Indexes populated")
    console.print()


def demonstrate_ordering():
    print_step(2, "Scheduling", "MinHeap for appointments, Queue for walk-ins, Stack for undo")

    appointments = MinHeap([(3, "Yoga"), (1, "Physio"), (2, "Spin")])
    appointments.insert((0, "Emergency check"))
    order = [appointments.extract_min()[1] for _ in range(appointments.size())]
    print_info(f"Appointments by priority: {order}")

    walk_ins = Queue()
    for name in ("Ada", "Alan", "Grace"):
        walk_ins.enqueue(name)
    print_info(f"Next walk-in: {walk_ins.dequeue()}, still waiting: {list(walk_ins)}")

    undo = Stack(capacity=3)
    for action in ("add member", "book class", "cancel class", "edit member"):
        undo.push(action)
    print_info(f"Undo stack (top first, oldest evicted): {list(undo)}")

    try:
        Queue().dequeue()
    except EmptyCollectionError as e:
        print_info(f"Empty queue reports: {e}")
    console.print()


def demonstrate_history():
    print_step(3, "Browsing history", "Cursor moves like a browser's back/forward buttons")

    history = DoubleLinkedList()
    workouts = XORLinkedList()
    for page in ("home", "members", "classes", "reports"):
        history.add(page)
        workouts.add(page)

    console.print(f"Start: {history.get_current()}")
    console.print(f"Forward: {history.navigate_forward()}, {history.navigate_forward()}")
    console.print(f"Back: {history.navigate_backward()}")
    console.print(f"XOR list forward: {workouts.traverse_forward()}")
    console.print(f"XOR list backward: {workouts.traverse_backward()}")
    console.print()


def demonstrate_graph():
    print_step(4, "Equipment dependencies")

    graph = Graph(5)
    for source, target in ((0, 1), (1, 2), (2, 0), (2, 3)):
        graph.add_edge(source, target)

    print_info(f"BFS from 0: {graph.bfs(0)}")
    print_info(f"DFS from 0: {graph.dfs(0)}")
    print_info(f"Strongly connected components: {graph.find_scc()}")
    console.print()


def demonstrate_text():
    print_step(5, "Search and compression")

    kmp = KMPAlgorithm()
    names = " ".join(name for _, name in MEMBERS)
    print_info(f"'Ada' found at {kmp.search(names, 'Ada')}")

    huffman = HuffmanCoding()
    report = "monthly report: attendance up, attendance steady, attendance up"
    encoded = huffman.encode(report)
    ratio = huffman.get_compression_ratio(report, encoded)
    print_info(f"{len(report) * 8} bits → {len(encoded)} bits ({ratio:.1f}% saved)")
    if huffman.decode(encoded) == report:
        print_success("Round trip intact")
    else:
        console.print("[bold red]✗[/bold red] Decoded text does not match the report")
    console.print()


def demonstrate_floor_plan():
    print_step(6, "Floor plan")

    floor = SparseMatrix(20, 20)
    floor.set(0, 3, "treadmill")
    floor.set(4, 7, "bench")
    floor.set(4, 7, None)
    floor.set(19, 19, "rower")
    console.print(repr(floor))
    console.print()


def main():
    verbose = "--verbose" in sys.argv
    if verbose:
        configure_logging(logging.DEBUG)

    print_header("memengine walkthrough", "Every structure, driven by a tiny orchestrator")
    demonstrate_indexes()
    demonstrate_ordering()
    demonstrate_history()
    demonstrate_graph()
    demonstrate_text()
    demonstrate_floor_plan()
    console.print(Rule("[dim]Done[/dim]"))


if __name__ == "__main__":
    main()
