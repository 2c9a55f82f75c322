# tfidf_ranker/performance_monitoring.py
import logging
import time
from io import StringIO


class Profiler:
    """
    Collects named timings for corpus building, scoring and ranking.

    Attributes:
        timings (dict): task name -> accumulated seconds
        start_time (float): Wall-clock start of the whole run, if started
    """
    def __init__(self):
        self.timings = {}
        self.start_time = None
        self.logger = logging.getLogger('profiler')

    def timer(self, task_name):
        """Returns a context manager that adds the block's duration to ``task_name``."""
        return Timer(task_name, self)

    def start_global_timer(self):
        self.start_time = time.time()

    def get_global_time(self):
        if self.start_time is None:
            return 0.0
        return time.time() - self.start_time

    def generate_report(self, doc_count: int, vocab_size: int, filename: str = None) -> str:
        """
        Format the collected timings.

        Args:
            doc_count (int): Documents in the corpus
            vocab_size (int): Distinct terms in the corpus
            filename (str, optional): Also write the report to this file

        Returns:
            str: The report text
        """
        report = StringIO()
        report.write("=== Timing Breakdown ===\n")
        for task, duration in self.timings.items():
            report.write(f"{task}: {duration:.4f}s\n")

        report.write(f"\nTracked Operations Total: {sum(self.timings.values()):.4f}s\n")
        report.write(f"Global Time: {self.get_global_time():.4f}s\n")
        report.write(f"Documents: {doc_count:,}  Vocabulary: {vocab_size:,}\n")
        report_content = report.getvalue()

        if filename:
            with open(filename, "w") as f:
                f.write(report_content)
            self.logger.info(f"Timing report written to {filename}")

        return report_content


class Timer:
    def __init__(self, task_name, profiler):
        self.task_name = task_name
        self.profiler = profiler

    def __enter__(self):
        self.start = time.time()
        return self

    def __exit__(self, *args):
        elapsed = time.time() - self.start
        timings = self.profiler.timings
        timings[self.task_name] = timings.get(self.task_name, 0.0) + elapsed
        self.profiler.logger.debug(f"{self.task_name} took {elapsed:.4f} seconds")
