"""
polygraph Example: Polyhedron Workflow

This example walks through the main editing operations:
1. Build a cube and a pentagonal cupola from the generator library
2. Truncate, stellate and take the dual with a MeshEditor
3. Extract a perimeter around a patch of faces
4. Print operation statistics

Perfect for: First-time users, quick start guide
"""

from polygraph import MeshEditor, EditorConfig, configure_logging, generators, summarize


def main():
    configure_logging('INFO')
    print("=" * 60)
    print("polygraph Example: Polyhedron Workflow")
    print("=" * 60)

    # Step 1: Generators
    print("\n[1] Building base solids...")
    editor = MeshEditor(generators.cube(), EditorConfig(require_manifold=True))
    print(f"  cube:    {editor.mesh}")
    print(f"  cupola:  {generators.cupola('pentagonal')}")
    print(f"  rotunda: {generators.rotunda(5)}")

    # Step 2: Edits
    print("\n[2] Editing...")
    truncated = editor.truncated()
    print(f"  truncated cube: {truncated.mesh}  faces={summarize(truncated.mesh)['face_sizes']}")
    stellated = editor.stellated()
    print(f"  stellated cube: {stellated.mesh}")
    octahedron = editor.dual()
    print(f"  dual of cube:   {octahedron.mesh}")
    editor.carve_edge('A', 'B').contract_face(['E', 'F', 'G', 'H'])
    print(f"  carved + contracted: {editor.mesh}")

    # Step 3: Perimeter of a patch
    print("\n[3] Perimeter of two adjacent faces...")
    cube = MeshEditor(generators.cube())
    print(f"  {''.join(cube.perimeter([['A', 'B', 'C', 'D'], ['A', 'B', 'E', 'F']]))}")

    # Step 4: Stats
    print("\n[4] Operation statistics")
    editor.print_stats()


if __name__ == "__main__":
    main()
