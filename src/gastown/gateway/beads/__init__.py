"""Beads issue store gateway.

This package provides an abstract interface and implementations for the local
issue store, including the ephemeral ("wisp") flag and the export filter that
keeps ephemeral issues out of the synced log.

Import from submodules:
- gastown.gateway.beads.abc: BeadsGateway (ABC)
- gastown.gateway.beads.real: RealBeadsGateway
- gastown.gateway.beads.fake: FakeBeadsGateway
- gastown.gateway.beads.dry_run: DryRunBeadsGateway
- gastown.gateway.beads.printing: PrintingBeadsGateway
- gastown.gateway.beads.types: BeadsIssue, is_ephemeral
- gastown.gateway.beads.export: filter_durable, serialize_export
"""
