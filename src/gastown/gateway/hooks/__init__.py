"""Hook file gateway for restart-and-resume work handoff.

Hooks attach work to an agent so it survives process restart:
  - hook-<agent>.json files track which bead is assigned to an agent
  - Created by `gt sling` and `gt handoff`
  - Read on session start to restore work context
  - Burned after the agent has accepted the work

Import from submodules:
- gastown.gateway.hooks.abc: HookStore (ABC)
- gastown.gateway.hooks.real: RealHookStore
- gastown.gateway.hooks.fake: FakeHookStore
- gastown.gateway.hooks.dry_run: DryRunHookStore
- gastown.gateway.hooks.types: HookType, HookHeader, SlungWork, parse_hook, ...
- gastown.gateway.hooks.restore: restore_on_start
"""
