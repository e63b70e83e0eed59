"""
Job queue example with a shared LinkedList buffer.

Demonstrates:
- A typed LinkedList used as the job buffer between two SimPy processes
- External locking: LinkedList has none, so every access holds a
  simpy.Resource of capacity 1
- An auditor walking the buffer with its own Cursor while jobs come and go
- Seeded exponential inter-arrival times for reproducible output

The simulation runs for 1000 time units and prints job totals.
"""

from __future__ import annotations

import random

import simpy

from pylinkedlist import LinkedList


def producer(env, buffer, lock, rng, mean, stats):
    """Insert numbered jobs into the buffer."""
    job_id = 0
    while True:
        yield env.timeout(rng.expovariate(1.0 / mean))
        with lock.request() as req:
            yield req
            buffer.insert(job_id)
        stats["produced"] += 1
        job_id += 1


def consumer(env, buffer, lock, rng, mean, stats):
    """Take jobs from the head of the buffer."""
    while True:
        yield env.timeout(rng.expovariate(1.0 / mean))
        with lock.request() as req:
            yield req
            head = buffer.first()
            if head is None:
                continue
            buffer.remove_node(head.data)
        stats["consumed"] += 1


def auditor(env, buffer, lock, period, stats):
    """Record the largest backlog seen, counted with a fresh cursor."""
    while True:
        yield env.timeout(period)
        with lock.request() as req:
            yield req
            if buffer.empty():
                continue
            backlog = sum(1 for _ in buffer.range())
        stats["max_backlog"] = max(stats["max_backlog"], backlog)


def run(until: float = 1000.0, seed: int = 42) -> dict:
    """Run the simulation and return its counters."""
    env = simpy.Environment()
    rng = random.Random(seed)
    buffer = LinkedList(typed=True)
    lock = simpy.Resource(env, capacity=1)
    stats = {"produced": 0, "consumed": 0, "max_backlog": 0}

    env.process(producer(env, buffer, lock, rng, 10.0, stats))
    env.process(consumer(env, buffer, lock, rng, 10.0, stats))
    env.process(auditor(env, buffer, lock, 50.0, stats))
    env.run(until=until)

    stats["left"] = len(buffer)
    return stats


def main() -> None:
    stats = run()

    print(f"Total number of jobs produced {stats['produced']}")
    print(f"Total number of jobs consumed {stats['consumed']}")
    print(f"Jobs left in buffer {stats['left']}")
    print(f"Largest backlog seen {stats['max_backlog']}")


if __name__ == "__main__":
    main()
