"""Example: snapshot a tiling to JSON and rebuild it."""

from isotile import TilingDocument, create_tiling

tiling = create_tiling(7)
params = list(tiling.get_parameters())
params[0] += 0.1
tiling.set_parameters(params)

text = TilingDocument.from_tiling(tiling).dumps(indent=2)
print(text)

restored = TilingDocument.loads(text).to_tiling()
print("Restored vertices:", restored.vertices())
