"""Sync git submodules, including nested ones, and optionally pull their latest commits."""


def update_submodules(git_repo, pull=False):
    print("=== Updating Git Submodules ===")
    print(f"Repository: {git_repo.working_tree_dir}")
    print()

    print("Initializing and syncing submodules...")
    git_repo.update_submodules()

    if pull:
        print()
        print("Pulling latest for each submodule...")
        output = git_repo.pull_submodules()
        if output:
            print(output)

    print()
    print("=== Submodule Status ===")
    status = git_repo.submodule_status()
    print(status if status else "(no submodules)")

    print()
    print("Done!")
