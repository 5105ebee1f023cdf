"""Layout chrome: the logout action and the navigation tabs.

Only authenticated views outside login and backend-error show them; the
guard verdict decides.
"""

from src.schemas import ChromeView, NavigationTab

RESOURCE_TITLES: dict[str, str] = {
    "pages": "Pages",
    "posts": "Posts",
    "categories": "Categories",
    "comments": "Comments",
    "users": "Users",
    "user-groups": "User Groups",
    "user-ranks": "User Ranks",
    "user-accounts": "Accounts",
    "user-payments": "Payments",
}

NAVIGATION_TABS: tuple[NavigationTab, ...] = (
    NavigationTab(label="Home", path="/"),
    *(NavigationTab(label=title, path=f"/{resource}") for resource, title in RESOURCE_TITLES.items()),
)


def build_chrome(show_authenticated_chrome: bool) -> ChromeView:
    if not show_authenticated_chrome:
        return ChromeView()
    return ChromeView(show_logout=True, navigation=list(NAVIGATION_TABS))


def resource_title(resource: str) -> str:
    return RESOURCE_TITLES.get(resource, resource.replace("-", " ").title())
