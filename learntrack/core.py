from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from learntrack.application.catalog.use_cases import CategoryUseCase, TagUseCase
from learntrack.application.identity.use_cases import GetUserByIdUseCase
from learntrack.application.learning.services import DependencyGraphService, ProgressService
from learntrack.application.learning.use_cases.dependencies import (
    CheckCircularDependencyUseCase,
    LinkDependencyUseCase,
    ListDependenciesUseCase,
    UnlinkDependencyUseCase,
)
from learntrack.application.learning.use_cases.learning_items import (
    CreateLearningItemUseCase,
    DeleteLearningItemUseCase,
    GetLearningItemsUseCase,
    RecalculateProgressUseCase,
    UpdateLearningItemStatusUseCase,
    UpdateLearningItemUseCase,
)
from learntrack.application.learning.use_cases.modules import (
    AddModuleUseCase,
    DeleteModuleUseCase,
    GetModulesUseCase,
    ReorderModulesUseCase,
    UpdateModuleStatusUseCase,
    UpdateModuleUseCase,
)
from learntrack.application.learning.use_cases.reports import GetDashboardMetricsUseCase
from learntrack.infrastructure.catalog.repositories.category_repository import (
    CategoryRepository,
)
from learntrack.infrastructure.catalog.repositories.tag_repository import TagRepository
from learntrack.infrastructure.identity.repositories.user_repository import UserRepository
from learntrack.infrastructure.learning.repositories.dependency_repository import (
    DependencyRepository,
)
from learntrack.infrastructure.learning.repositories.learning_item_repository import (
    LearningItemRepository,
)
from learntrack.infrastructure.learning.repositories.module_repository import ModuleRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    category_repository = providers.Factory(CategoryRepository, db=db)
    tag_repository = providers.Factory(TagRepository, db=db)
    learning_item_repository = providers.Factory(LearningItemRepository, db=db)
    module_repository = providers.Factory(ModuleRepository, db=db)
    dependency_repository = providers.Factory(DependencyRepository, db=db)

    # Application services
    dependency_graph_service = providers.Factory(
        DependencyGraphService,
        dependency_repository=dependency_repository,
    )
    progress_service = providers.Factory(
        ProgressService,
        learning_item_repository=learning_item_repository,
        module_repository=module_repository,
    )

    # Identity
    get_user_by_id_use_case = providers.Factory(
        GetUserByIdUseCase,
        user_repository=user_repository,
    )

    # Catalog
    category_use_case = providers.Factory(
        CategoryUseCase,
        category_repository=category_repository,
        learning_item_repository=learning_item_repository,
    )
    tag_use_case = providers.Factory(TagUseCase, tag_repository=tag_repository)

    # Learning items
    create_learning_item_use_case = providers.Factory(
        CreateLearningItemUseCase,
        learning_item_repository=learning_item_repository,
        module_repository=module_repository,
        category_repository=category_repository,
        tag_repository=tag_repository,
        progress_service=progress_service,
    )
    get_learning_items_use_case = providers.Factory(
        GetLearningItemsUseCase,
        learning_item_repository=learning_item_repository,
        module_repository=module_repository,
        tag_repository=tag_repository,
    )
    update_learning_item_use_case = providers.Factory(
        UpdateLearningItemUseCase,
        learning_item_repository=learning_item_repository,
        category_repository=category_repository,
        tag_repository=tag_repository,
    )
    update_learning_item_status_use_case = providers.Factory(
        UpdateLearningItemStatusUseCase,
        learning_item_repository=learning_item_repository,
        progress_service=progress_service,
    )
    recalculate_progress_use_case = providers.Factory(
        RecalculateProgressUseCase,
        learning_item_repository=learning_item_repository,
        progress_service=progress_service,
    )
    delete_learning_item_use_case = providers.Factory(
        DeleteLearningItemUseCase,
        learning_item_repository=learning_item_repository,
        dependency_repository=dependency_repository,
    )

    # Reports
    get_dashboard_metrics_use_case = providers.Factory(
        GetDashboardMetricsUseCase,
        learning_item_repository=learning_item_repository,
        category_repository=category_repository,
    )

    # Modules
    get_modules_use_case = providers.Factory(
        GetModulesUseCase,
        module_repository=module_repository,
        learning_item_repository=learning_item_repository,
    )
    add_module_use_case = providers.Factory(
        AddModuleUseCase,
        module_repository=module_repository,
        learning_item_repository=learning_item_repository,
        progress_service=progress_service,
    )
    update_module_use_case = providers.Factory(
        UpdateModuleUseCase,
        module_repository=module_repository,
        learning_item_repository=learning_item_repository,
    )
    update_module_status_use_case = providers.Factory(
        UpdateModuleStatusUseCase,
        module_repository=module_repository,
        learning_item_repository=learning_item_repository,
        progress_service=progress_service,
    )
    delete_module_use_case = providers.Factory(
        DeleteModuleUseCase,
        module_repository=module_repository,
        learning_item_repository=learning_item_repository,
        progress_service=progress_service,
    )
    reorder_modules_use_case = providers.Factory(
        ReorderModulesUseCase,
        module_repository=module_repository,
        learning_item_repository=learning_item_repository,
    )

    # Dependencies
    link_dependency_use_case = providers.Factory(
        LinkDependencyUseCase,
        dependency_repository=dependency_repository,
        learning_item_repository=learning_item_repository,
        dependency_graph_service=dependency_graph_service,
    )
    unlink_dependency_use_case = providers.Factory(
        UnlinkDependencyUseCase,
        dependency_repository=dependency_repository,
        learning_item_repository=learning_item_repository,
    )
    list_dependencies_use_case = providers.Factory(
        ListDependenciesUseCase,
        dependency_repository=dependency_repository,
        learning_item_repository=learning_item_repository,
    )
    check_circular_dependency_use_case = providers.Factory(
        CheckCircularDependencyUseCase,
        learning_item_repository=learning_item_repository,
        dependency_graph_service=dependency_graph_service,
    )


container = Container()
