"""Interfaces (application boundary) for USERBASE.

Defines the framework-free ports the service layer depends on: the user
repository, the logger adapter, the id generator and the cancellation signal
threaded through every repository call. Business rules stay out of this
package.

Dependency rule: may import `userbase.domain` only. It may be imported by
`userbase.service_layer`, `userbase.adapters`, and `userbase.bootstrap`.
"""
