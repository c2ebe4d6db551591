"""Entrypoints (inbound adapters) for USERBASE.

Expose the application to the outside world. Today that is the command line:
parse inputs, call the user service obtained from `userbase.bootstrap`, and
present results.

Dependency rule: obtain the wired service and engine from `userbase.bootstrap`.
May import the public names of `userbase.service_layer` (requests, failure
kinds), `userbase.config`, `userbase.logging` and the schema helpers of
`userbase.adapters.db` used by `db` commands; no other adapters.
"""
