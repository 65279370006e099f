"""Smoke test to ensure top-level package import works without triggering
circular import errors. This guards against regressions in the flat API
layer (`polygraph/__init__.py`).
"""

def test_import_polygraph_smoke():
    import polygraph  # noqa: F401
    assert hasattr(polygraph, 'MeshEditor')
    assert hasattr(polygraph, 'op_truncate')
    # lazy proxy should resolve
    assert polygraph.generators.cube().vertex_count == 8


def test_generators_proxy_resolves_once():
    import polygraph
    from polygraph.core import generators as real
    proxy = polygraph.generators
    assert 'cube' in dir(proxy)
    assert proxy.cube is real.cube
    assert proxy.make is real.make
    assert proxy.tetrahedron().face_count == 4
