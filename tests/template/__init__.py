"""
Template tests.

Tests for stencil.template module:
- test_values.py: Int/Float/String/Tuple rendering and truthiness
- test_context.py: Context mapping and scoped bindings
- test_basic.py: Interpolation of {{ name }} markers
- test_parser.py: Tree shape and parse-time loop source resolution
- test_control_flow.py: for loops and if blocks
- test_errors.py: Every syntax and render error kind
- test_template.py: Template facade, file loading, tree dump
- test_config.py: Module configuration
- test_concurrency.py: Thread safety

Maps to: stencil/template/
"""
