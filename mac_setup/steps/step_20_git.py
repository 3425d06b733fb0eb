from __future__ import annotations

import logging

from ..context import SetupContext
from ..lib.git import git_config_get, git_config_set
from ..lib.ssh import add_to_keychain, generate_key, public_key_path, start_agent

logger = logging.getLogger(__name__)


class GitStep:
    step_id = "20_git"

    def run(self, ctx: SetupContext) -> None:
        ctx.reporter.header("Step 2: GitHub Configuration")

        if not ctx.prompts.prompt_yes_no("Configure GitHub?"):
            ctx.reporter.warning("GitHub configuration skipped")
            return

        self._configure_identity(ctx)

        if ctx.prompts.prompt_yes_no("Setup GitHub SSH key?"):
            self._setup_ssh_key(ctx)

    def _configure_identity(self, ctx: SetupContext) -> None:
        cfg = ctx.config
        current_name = git_config_get(ctx, "user.name")
        current_email = git_config_get(ctx, "user.email")

        name = ctx.prompts.prompt_with_default("GitHub name", current_name or cfg.default_git_name)
        email = ctx.prompts.prompt_with_default(
            "GitHub email", current_email or cfg.default_git_email
        )

        git_config_set(ctx, "user.name", name)
        git_config_set(ctx, "user.email", email)

        git_config_set(ctx, "init.defaultBranch", cfg.git_default_branch)
        git_config_set(ctx, "pull.rebase", "true" if cfg.git_pull_rebase else "false")

        ctx.git_name = name
        ctx.git_email = email

        ctx.reporter.success("GitHub configured")
        ctx.reporter.echo(f"  Name: {name}")
        ctx.reporter.echo(f"  Email: {email}")

    def _setup_ssh_key(self, ctx: SetupContext) -> None:
        key_path = ctx.ssh_key_path

        # Never regenerate: the old key may already be registered with GitHub.
        if key_path.exists():
            ctx.reporter.warning(f"SSH key already exists at {key_path}")
            return

        email = ctx.prompts.prompt_with_default(
            "SSH key email", ctx.git_email or ctx.config.default_git_email
        )
        generate_key(ctx, key_path, email)
        start_agent(ctx)
        add_to_keychain(ctx, key_path)

        ctx.reporter.success("SSH key created")
        ctx.reporter.notice("Add this key to GitHub:")
        pub = public_key_path(key_path)
        if ctx.dry_run:
            logger.info("Would print %s", pub)
        else:
            ctx.reporter.echo(pub.read_text(encoding="utf-8").rstrip("\n"))
        ctx.reporter.echo()
