from dishka import Provider as DishkaProvider

from bloglist.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for all bloglist DI providers.

    Factories default to the UOW scope; application-lifetime factories must
    say `scope=Scope.APP` explicitly.
    """

    scope = Scope.UOW
