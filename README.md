# engram

The core data model of a long-lived memory for coding agents. It describes
what an agent learns while working on a project, and how that knowledge ages,
is trusted and is shared.

## What it provides

- **Observations** (`engram.observation`): the basic unit of memory. An
  `Observation` has an `ObservationType` (such as `ObservationType.BUGFIX` or
  `ObservationType.DECISION`), a `Scope`, a `ProvenanceSource` and a
  `LifecycleState`. Its `normalized_hash` is computed with
  `Observation.compute_hash`, a SHA-256 digest of title and content, and
  `Observation.generate_session_id` gives a fresh UUID4 string.
- **Topic keys** (`engram.topic`): `suggest_topic_key` and `slugify` build keys
  of the form `"family/slug"`, for example `"bug/fix-n-1-in-userlist"`.
- **Lifecycle policies** (`engram.lifecycle`): `LifecyclePolicy.for_type` gives,
  for each observation type, how long an observation stays active, when it goes
  stale, is archived or deleted, and how fast it decays.
  `LifecyclePolicy.all_defaults` lists the policy of every type.
- **Scoring** (`engram.score`): `decay_score` and `decay_score_with_lifecycle`
  blend recency (exponential decay with a 30-day half-life; pinned items always
  score 1) with a logarithmic access-frequency boost. `compute_final_score`
  weights text, vector, recency and frequency scores 0.3, 0.3, 0.2 and 0.2.
- **Salience** (`engram.salience`): `MemorySalience.decay_multiplier` derives a
  multiplier from emotional valence and surprise, never below 0.1.
- **Sessions, graph edges, episodic and semantic memory** (`engram.session`,
  `engram.graph`, `engram.memory`). `classify_query_type` tells whether a query
  is after episodic memory, semantic memory, or both.
- **Beliefs** (`engram.belief`): values that change as evidence arrives.
  `Belief.process_evidence` picks a `BeliefOperation` and
  `Belief.execute_operation` applies it; replaced values are kept as
  `HistoricalBelief` entries.
- **Compaction levels** (`engram.compaction`): `determine_level` picks the
  level of abstraction (fact, pattern or principle) that a query asks about.
- **Knowledge boundaries and capsules** (`engram.boundary`, `engram.capsule`):
  `KnowledgeBoundary` tracks how much is known about a domain as a
  `ConfidenceLevel`, and `KnowledgeCapsule.to_markdown` renders a topic summary
  as Markdown.
- **Attachments** (`engram.attachment`): `CodeDiff`, `TerminalOutput`,
  `ErrorTrace` and `GitCommit`, attached to a `MultimodalObservation`.
  Attachments convert to and from tagged dictionaries with `to_dict` and
  `Attachment.from_dict`; `truncate_terminal_output` keeps the last lines of
  long output.
- **Entities** (`engram.entity`): `Entity` with aliases and matching, and
  `extract_entities`, which finds file paths and PascalCase names in text.
- **Events and throttling** (`engram.stream`): `MemoryEvent` kinds such as
  `RelevantFileContext`, `DejaVu` and `ReviewDue`; `EventThrottle` spaces
  deliveries by whole seconds, and `NotificationThrottle` spaces them by
  milliseconds and drops events whose content was sent recently.
- **Permissions** (`engram.permissions`): `AccessLevel` (read, write, admin),
  `PermissionRule` and `PermissionEngine` for agents acting on projects.
- **Encryption** (`engram.crypto`): `encrypt` and `decrypt` with
  ChaCha20-Poly1305, the random 12-byte nonce placed before the ciphertext;
  `derive_key` turns a passphrase into a 32-byte key with salted SHA-256, and
  `is_encrypted_file` tells encrypted data from a SQLite file.

## What it does not do

This package is the data model only. It does not store observations anywhere,
has no search index, no HTTP server and no command-line program. Callers keep
and persist the objects themselves.

## Installation

```
pip install .
```

## Example

```python
from engram.observation import ObservationType
from engram.topic import suggest_topic_key
from engram.belief import Belief

key = suggest_topic_key(ObservationType.BUGFIX, "Fix N+1 in UserList")
# "bug/fix-n-1-in-userlist"

belief = Belief("auth_method", "RS256")
op = belief.process_evidence("ES256", 0.85)   # BeliefOperation.UPDATE
belief.execute_operation(op, "ES256", 1)
print(belief.current_value, len(belief.previous_values))  # ES256 1
```

Encrypting data:

```python
from engram.crypto import derive_key, encrypt, decrypt

key = derive_key("placeholder")
blob = encrypt(key, b"payload")
assert decrypt(key, blob) == b"payload"
```

## Errors

The parsers raise subclasses of `engram.errors.EngramError`:
`ObservationType.parse` raises `InvalidObservationTypeError`, while
`ProvenanceSource.parse`, `LifecycleState.parse`, `RelationType.parse` and
`MemoryType.parse` raise `ConfigError`. `Attachment.from_dict` raises
`SerializationError` for an unknown kind or wrong fields.

`engram.crypto` has its own errors: `EncryptionError`, and its subclass
`DecryptionError` for a wrong key, tampered data or data too short to hold a
nonce.

## Running the tests

```
pip install ".[test]"
pytest
```