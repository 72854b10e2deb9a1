"""wpscaffold services."""

from wpscaffold.services.configurator import ComposerConfigurator
from wpscaffold.services.gitignore import (
    GitignoreService,
    compile_template,
    merge_gitignore,
)
from wpscaffold.services.ordering import (
    ALPHABETICAL_PROPERTIES,
    AUTOLOAD_ORDER,
    COMPOSER_ORDER,
    sort_by_order,
    sort_properties,
)
from wpscaffold.services.public_dir import PublicDirectoryResolver
from wpscaffold.services.reconciler import ManifestReconciler, reconcile
from wpscaffold.services.tree_search import grep_tree, tree_contains

__all__ = [
    "ALPHABETICAL_PROPERTIES",
    "AUTOLOAD_ORDER",
    "COMPOSER_ORDER",
    "ComposerConfigurator",
    "GitignoreService",
    "ManifestReconciler",
    "PublicDirectoryResolver",
    "compile_template",
    "grep_tree",
    "merge_gitignore",
    "reconcile",
    "sort_by_order",
    "sort_properties",
    "tree_contains",
]
