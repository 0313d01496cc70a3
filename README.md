# arcext

Building blocks for extensions that sit on top of a game's real-time combat
log and its MumbleLink shared memory. The package has no dependencies beyond
the standard library.

## Modules

- `arcext.translations`: the `ExtensionTranslation` keys (for example
  `ExtensionTranslation.APPLY_BUTTON`), the `Language` enum (`ENGLISH`,
  `GERMAN`, `FRENCH`, `SPANISH`), `translate(key, language)` for a single
  string and `translations_for(language)` for a whole table. An unknown key or
  language raises `ValueError`.
- `arcext.combat`: the combat log enums (`Iff`, `CbtResult`, `CbtActivation`,
  `CbtStateChange`, `CbtBuffRemove`, `CbtBuffCycle`, `Attribute`,
  `BuffCategory`, `CustomSkill`, `GwLanguage`, `ContentLocal`, `Prof`,
  `SpecializationId`, `WeaponSet`, `ColorsCore`), the `CombatEvent` record
  with `from_bytes` / `to_bytes` for its 64-byte little-endian layout, and the
  `Agent` record. `CombatEvent.activation`, `.buff_remove` and
  `.state_change` give the raw bytes as enums, falling back to `UNKNOWN`.
- `arcext.structs`: the `Alignment`, `Position`, `CornerPosition` and
  `SizingPolicy` enums, `to_string(value, language)` for their translated
  display names, and `is_player(agent)`, which checks an `Agent` for a real
  elite value, a name longer than one byte and a non-zero id.
- `arcext.mumble`: `LinkedMem.from_bytes` decodes the 5460-byte MumbleLink
  block, `LinkedMem.mumble_context()` (or `MumbleContext.from_bytes`) decodes
  the game's 88-byte context, and `Identity.from_json` parses the identity
  JSON, keeping defaults for missing keys. Also `MountIndex`, `UiStateFlags`,
  `Race` and `UIScaling`.
- `arcext.mob_ids`: the `TargetID` and `TrashID` species ids.
- `arcext.json_ext`: `to_json(obj, fields)` builds a JSON-ready dict from an
  object's attributes (a dataclass's fields when `fields` is omitted), and
  `from_json(obj, data, fields)` sets only the attributes whose keys are
  present in `data`, raising `TypeError` for values of the wrong kind.
- `arcext.ring_buffer`: `RingBuffer`, a fixed-capacity sequence that drops
  its oldest entry once full, with `push_back`, `back`, `clear`, `resize`,
  `copy`, indexing and forward and reverse iteration.

## Installation

```
pip install arcext
```

## Examples

```python
from arcext.ring_buffer import RingBuffer

buf = RingBuffer(3)
for n in range(5):
    buf.push_back(n)
list(buf)      # [2, 3, 4]
buf.back()     # 4
buf.resize(5)
buf.push_back(5)
list(buf)      # [2, 3, 4, 5]
```

```python
from arcext.translations import ExtensionTranslation, Language, translate

translate(ExtensionTranslation.APPLY_BUTTON, Language.GERMAN)  # "Anwenden"
```

```python
from arcext.structs import Alignment, to_string
from arcext.translations import Language

to_string(Alignment.CENTER)                   # "Centered"
to_string(Alignment.CENTER, Language.FRENCH)  # "Centré"
```

```python
from arcext.mumble import LinkedMem

with open("mumble_dump.bin", "rb") as fh:
    mem = LinkedMem.from_bytes(fh.read())
context = mem.mumble_context()
print(context.map_id)
```

## What it does not do

The package only decodes and models data. It does not open the MumbleLink
shared memory or hook into the game's combat log itself: you pass it the
bytes. It draws no windows or settings screens, and it does not check for or
download updates.

## Running the tests

```
pip install "arcext[test]"
pytest
```