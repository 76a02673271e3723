"""
Concurrency tests for Template.

Tests that renders with their own bindings do not interfere when run from
several threads. Shared trees are read-only; each render gets its own
Context.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from stencil.template import Context, parse, render

# Timeout in seconds for collecting results - prevents CI hangs
THREAD_TIMEOUT = 30


class TestThreadSafety:
    """Tests for thread-safe template rendering."""

    @pytest.mark.slow
    def test_concurrent_render_same_template(self, Template):
        """Threads rendering one Template with per-call values get their own output."""
        template = Template("{% for i in range(n) %}{{ tag }}{{ i }};{% endfor %}")

        def render_loop(thread_id):
            results = []
            for n in range(20):
                tag = f"t{thread_id}_"
                expected = "".join(f"{tag}{i};" for i in range(n))
                results.append((template(n=n, tag=tag), expected))
            return results

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(render_loop, t) for t in range(8)]
            for future in futures:
                for got, expected in future.result(timeout=THREAD_TIMEOUT):
                    assert got == expected

    @pytest.mark.slow
    def test_shared_tree_separate_contexts(self):
        """One parsed tree renders concurrently against separate contexts."""
        tree = parse(
            "{% for x in xs %}{% for i in range(3) %}{{ x }}{{ i }} {% endfor %}{% endfor %}",
            Context(xs=()),
        )

        def render_with(value):
            ctx = Context(xs=(value, value))
            return render(tree, ctx), list(ctx)

        with ThreadPoolExecutor(max_workers=8) as pool:
            outputs = list(pool.map(render_with, range(50), timeout=THREAD_TIMEOUT))

        for value, (text, names) in enumerate(outputs):
            assert text == f"{value}0 {value}1 {value}2 " * 2
            assert names == ["xs"]
