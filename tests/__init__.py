"""PETSTORE test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : The same behaviour run against every repository adapter.
- integration/  : Real interactions with a database (SQLite file, PostgreSQL).
- e2e/          : The CLI driven through click's CliRunner.
- functional/   : User-visible onboarding flows at the CLI boundary.
- fixtures/     : Database and data-generation fixtures (pytest plugins).
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- Integration hits real dependencies with realistic setup/teardown.
- Functional asserts user-observable results, not internals.
- Property-based tests live with the layer they exercise.
- PostgreSQL tests are skipped when Docker is not available.
"""
