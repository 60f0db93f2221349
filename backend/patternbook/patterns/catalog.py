# backend/patternbook/patterns/catalog.py
"""
Pattern Catalog - the built-in design pattern reference

Fifteen classic object-oriented patterns, in editorial order.
"""

import textwrap

from patternbook.patterns.registry import (
    CodeExample,
    PatternCategory,
    PatternEntry,
    PatternRegistry,
)
from patternbook.utils.debug import debug


def _code(source: str) -> CodeExample:
    return CodeExample(code=textwrap.dedent(source).strip(), language="python")


# ============================================================
# CREATIONAL PATTERNS
# ============================================================

SINGLETON_PATTERN = PatternEntry(
    name="Singleton",
    description="Ensure a class has only one instance and provide a global point of access to it.",
    category=PatternCategory.CREATIONAL,
    when_to_use=[
        "Exactly one instance of a class must exist, such as a configuration store or a connection pool.",
        "The single instance must be reachable from many unrelated places.",
        "Lazy initialization of an expensive shared object is needed.",
    ],
    when_not_to_use=[
        "The object carries state that makes tests depend on each other.",
        "A module-level object or dependency injection would do the same job.",
        "Different parts of the program may later need different instances.",
    ],
    pros=[
        "Controlled access to the sole instance.",
        "Instance is created only when first requested.",
        "Avoids passing the same object through every call.",
    ],
    cons=[
        "Introduces hidden global state.",
        "Hard to substitute in unit tests.",
        "Couples callers to the concrete class.",
    ],
    tags=["singleton", "global", "single instance", "shared state", "configuration"],
    example=_code('''
        class Configuration:
            """Application settings; only one copy ever exists."""

            _instance = None

            def __new__(cls):
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._settings = {}
                return cls._instance

            def set(self, key, value):
                self._settings[key] = value

            def get(self, key, default=None):
                return self._settings.get(key, default)


        first = Configuration()
        first.set("debug", True)

        second = Configuration()
        print(second.get("debug"))   # True
        print(first is second)       # True
    '''),
)


FACTORY_PATTERN = PatternEntry(
    name="Factory",
    description="Define an interface for creating an object, but let a dedicated method or subclass decide which concrete class to instantiate.",
    category=PatternCategory.CREATIONAL,
    when_to_use=[
        "The exact type to create is only known at runtime.",
        "Object creation logic should live in one place instead of being spread across callers.",
        "New product types are added often and callers should not change.",
    ],
    when_not_to_use=[
        "There is only one concrete class and no sign of more.",
        "A plain constructor call is already clear.",
    ],
    pros=[
        "Decouples callers from concrete classes.",
        "Centralizes creation logic.",
        "Makes adding new product types easy.",
    ],
    cons=[
        "Adds an extra layer of indirection.",
        "Registries of product types can grow large.",
    ],
    tags=["factory", "creation", "instantiate", "construct", "runtime type"],
    example=_code('''
        class Shape:
            def area(self):
                raise NotImplementedError


        class Circle(Shape):
            def __init__(self, radius):
                self.radius = radius

            def area(self):
                return 3.14159 * self.radius ** 2


        class Square(Shape):
            def __init__(self, side):
                self.side = side

            def area(self):
                return self.side ** 2


        class ShapeFactory:
            _shapes = {"circle": Circle, "square": Square}

            @classmethod
            def create(cls, kind, *args):
                try:
                    return cls._shapes[kind](*args)
                except KeyError:
                    raise ValueError(f"Unknown shape: {kind}")


        print(ShapeFactory.create("circle", 2).area())   # 12.56636
        print(ShapeFactory.create("square", 3).area())   # 9
    '''),
)


# ============================================================
# BEHAVIORAL PATTERNS (part 1)
# ============================================================

OBSERVER_PATTERN = PatternEntry(
    name="Observer",
    description="Define a one-to-many dependency so that when one object changes state, all its dependents are notified automatically.",
    category=PatternCategory.BEHAVIORAL,
    when_to_use=[
        "Several objects must react when another object changes.",
        "The subject should not know the concrete classes of the listeners.",
        "Event or notification systems, such as UI updates or domain events.",
    ],
    when_not_to_use=[
        "The notification order matters and must be guaranteed.",
        "Only one fixed receiver exists; a direct call is simpler.",
    ],
    pros=[
        "Loose coupling between subject and observers.",
        "Observers can be added or removed at runtime.",
        "Supports broadcast communication.",
    ],
    cons=[
        "Unexpected update cascades are hard to trace.",
        "Forgotten subscriptions leak memory.",
    ],
    tags=["observer", "event", "subscribe", "notify", "listener", "publish"],
    example=_code('''
        class Subject:
            def __init__(self):
                self._observers = []

            def attach(self, observer):
                self._observers.append(observer)

            def detach(self, observer):
                self._observers.remove(observer)

            def notify(self, event):
                for observer in self._observers:
                    observer.update(event)


        class Logger:
            def update(self, event):
                print(f"log: {event}")


        class Mailer:
            def update(self, event):
                print(f"mail: {event}")


        orders = Subject()
        orders.attach(Logger())
        orders.attach(Mailer())
        orders.notify("order #42 shipped")
        # log: order #42 shipped
        # mail: order #42 shipped
    '''),
)


STRATEGY_PATTERN = PatternEntry(
    name="Strategy",
    description="Define a family of algorithms, encapsulate each one, and make them interchangeable at runtime.",
    category=PatternCategory.BEHAVIORAL,
    when_to_use=[
        "Several variants of an algorithm exist and the choice is made at runtime.",
        "A class has large conditionals that select between behaviors.",
        "Algorithm details should be hidden from the code that uses them.",
    ],
    when_not_to_use=[
        "There are only one or two algorithms that rarely change.",
        "Callers would need to know every strategy to pick one.",
    ],
    pros=[
        "Algorithms can be swapped without touching the context.",
        "Replaces conditionals with composition.",
        "Each strategy is easy to test in isolation.",
    ],
    cons=[
        "More classes or callables to maintain.",
        "Clients must understand the differences between strategies.",
    ],
    tags=["strategy", "algorithm", "interchangeable", "policy", "swap behavior"],
    example=_code('''
        class PercentageDiscount:
            def __init__(self, percent):
                self.percent = percent

            def apply(self, amount):
                return amount * (1 - self.percent / 100)


        class FixedDiscount:
            def __init__(self, value):
                self.value = value

            def apply(self, amount):
                return max(amount - self.value, 0)


        class Checkout:
            def __init__(self, discount):
                self.discount = discount

            def total(self, amount):
                return self.discount.apply(amount)


        cart = Checkout(PercentageDiscount(10))
        print(cart.total(200))   # 180.0

        cart.discount = FixedDiscount(50)
        print(cart.total(200))   # 150
    '''),
)


# ============================================================
# STRUCTURAL PATTERNS
# ============================================================

DECORATOR_PATTERN = PatternEntry(
    name="Decorator",
    description="Attach additional responsibilities to an object dynamically by wrapping it in an object with the same interface.",
    category=PatternCategory.STRUCTURAL,
    when_to_use=[
        "Behavior must be added to individual objects without affecting others.",
        "Subclassing for every combination of features would explode the class count.",
        "Responsibilities should be stackable and removable.",
    ],
    when_not_to_use=[
        "The component interface is large, making every wrapper tedious to write.",
        "Code relies on object identity or concrete type checks.",
    ],
    pros=[
        "More flexible than static inheritance.",
        "Features can be combined in any order.",
        "Each wrapper has a single responsibility.",
    ],
    cons=[
        "Many small objects that look alike.",
        "Debugging deep wrapper stacks is harder.",
    ],
    tags=["decorator", "wrapper", "wrap", "add behavior", "responsibilities"],
    example=_code('''
        class Text:
            def __init__(self, content):
                self.content = content

            def render(self):
                return self.content


        class Bold:
            def __init__(self, inner):
                self.inner = inner

            def render(self):
                return f"<b>{self.inner.render()}</b>"


        class Italic:
            def __init__(self, inner):
                self.inner = inner

            def render(self):
                return f"<i>{self.inner.render()}</i>"


        plain = Text("hello")
        fancy = Italic(Bold(plain))
        print(plain.render())   # hello
        print(fancy.render())   # <i><b>hello</b></i>
    '''),
)


ADAPTER_PATTERN = PatternEntry(
    name="Adapter",
    description="Convert the interface of a class into another interface that clients expect, letting incompatible classes work together.",
    category=PatternCategory.STRUCTURAL,
    when_to_use=[
        "An existing class has the right behavior but the wrong interface.",
        "Integrating third-party or legacy code that cannot be changed.",
        "Several incompatible classes must be used through one common interface.",
    ],
    when_not_to_use=[
        "The source code can simply be changed to match.",
        "The interfaces differ in meaning, not just in shape.",
    ],
    pros=[
        "Reuses existing code without modifying it.",
        "Keeps conversion logic in one place.",
    ],
    cons=[
        "Adds another class to the design.",
        "Can hide a poor fit between two abstractions.",
    ],
    tags=["adapter", "wrapper", "legacy", "incompatible", "interface conversion", "third-party"],
    example=_code('''
        class LegacyPrinter:
            def print_text(self, text, upper):
                print(text.upper() if upper else text)


        class Printer:
            """Interface the application expects."""

            def write(self, message):
                raise NotImplementedError


        class LegacyPrinterAdapter(Printer):
            def __init__(self, legacy):
                self.legacy = legacy

            def write(self, message):
                self.legacy.print_text(message, upper=False)


        def report(printer: Printer):
            printer.write("monthly report ready")


        report(LegacyPrinterAdapter(LegacyPrinter()))
        # monthly report ready
    '''),
)


BRIDGE_PATTERN = PatternEntry(
    name="Bridge",
    description="Decouple an abstraction from its implementation so that the two can vary independently.",
    category=PatternCategory.STRUCTURAL,
    when_to_use=[
        "Both the abstraction and its implementation should be extensible by subclassing.",
        "Changes in the implementation must not affect client code.",
        "A class hierarchy would otherwise multiply across two dimensions.",
    ],
    when_not_to_use=[
        "There is a single implementation with no plan for more.",
        "The extra indirection would only obscure a small class.",
    ],
    pros=[
        "Avoids a combinatorial explosion of subclasses.",
        "Implementation can be switched at runtime.",
        "Abstraction and implementation evolve separately.",
    ],
    cons=[
        "Increases the number of classes.",
        "Harder to grasp for readers new to the code.",
    ],
    tags=["bridge", "abstraction", "implementation", "two dimensions", "platform"],
    example=_code('''
        class Renderer:
            def circle(self, radius):
                raise NotImplementedError


        class VectorRenderer(Renderer):
            def circle(self, radius):
                return f"vector circle r={radius}"


        class RasterRenderer(Renderer):
            def circle(self, radius):
                return f"raster circle r={radius}"


        class Circle:
            def __init__(self, renderer, radius):
                self.renderer = renderer
                self.radius = radius

            def draw(self):
                return self.renderer.circle(self.radius)

            def resize(self, factor):
                self.radius *= factor


        for renderer in (VectorRenderer(), RasterRenderer()):
            shape = Circle(renderer, 5)
            shape.resize(2)
            print(shape.draw())
        # vector circle r=10
        # raster circle r=10
    '''),
)


COMPOSITE_PATTERN = PatternEntry(
    name="Composite",
    description="Compose objects into tree structures to represent part-whole hierarchies, letting clients treat single objects and groups uniformly.",
    category=PatternCategory.STRUCTURAL,
    when_to_use=[
        "Data forms a tree hierarchy, such as files and folders or menus and items.",
        "Clients should ignore the difference between leaves and containers.",
        "Operations must apply recursively across the whole tree.",
    ],
    when_not_to_use=[
        "The structure is flat or only one level deep.",
        "Leaves and containers need very different interfaces.",
    ],
    pros=[
        "Uniform handling of simple and complex elements.",
        "New element types fit into the tree easily.",
    ],
    cons=[
        "The shared interface can become overly general.",
        "Restricting which children a container accepts is awkward.",
    ],
    tags=["composite", "tree", "hierarchy", "part-whole", "recursive", "nested"],
    example=_code('''
        class File:
            def __init__(self, name, size):
                self.name = name
                self.size = size

            def total_size(self):
                return self.size


        class Folder:
            def __init__(self, name):
                self.name = name
                self.children = []

            def add(self, child):
                self.children.append(child)
                return self

            def total_size(self):
                return sum(child.total_size() for child in self.children)


        docs = Folder("docs").add(File("a.txt", 120)).add(File("b.txt", 80))
        root = Folder("root").add(docs).add(File("readme.md", 40))

        print(docs.total_size())   # 200
        print(root.total_size())   # 240
    '''),
)


FACADE_PATTERN = PatternEntry(
    name="Facade",
    description="Provide a single simplified interface to a complex subsystem.",
    category=PatternCategory.STRUCTURAL,
    when_to_use=[
        "A subsystem has many classes and most clients need only a common subset.",
        "Client code should be shielded from subsystem changes.",
        "Layering a system, with one entry point per layer.",
    ],
    when_not_to_use=[
        "Clients regularly need the full power of the subsystem.",
        "The facade would simply forward every call one to one.",
    ],
    pros=[
        "Simplifies usage of complex code.",
        "Reduces coupling between clients and subsystem internals.",
    ],
    cons=[
        "The facade can grow into a god object.",
        "Hides capabilities that some clients need.",
    ],
    tags=["facade", "simplify", "subsystem", "entry point", "complex"],
    example=_code('''
        class Inventory:
            def reserve(self, item):
                print(f"reserved {item}")


        class Payments:
            def charge(self, amount):
                print(f"charged {amount}")


        class Shipping:
            def schedule(self, item):
                print(f"shipping {item}")


        class OrderFacade:
            def __init__(self):
                self.inventory = Inventory()
                self.payments = Payments()
                self.shipping = Shipping()

            def place_order(self, item, amount):
                self.inventory.reserve(item)
                self.payments.charge(amount)
                self.shipping.schedule(item)


        OrderFacade().place_order("keyboard", 49.90)
        # reserved keyboard
        # charged 49.9
        # shipping keyboard
    '''),
)


FLYWEIGHT_PATTERN = PatternEntry(
    name="Flyweight",
    description="Share common state between many fine-grained objects to support large numbers of them efficiently.",
    category=PatternCategory.STRUCTURAL,
    when_to_use=[
        "An application creates a huge number of similar objects.",
        "Most object state can be made extrinsic and passed in by the caller.",
        "Memory usage is dominated by duplicated immutable data.",
    ],
    when_not_to_use=[
        "Objects are few or have mostly unique state.",
        "Shared state must be mutated per object.",
    ],
    pros=[
        "Large memory savings when many objects share state.",
        "Shared intrinsic state is created once.",
    ],
    cons=[
        "Callers must manage extrinsic state.",
        "Code becomes harder to follow.",
    ],
    tags=["flyweight", "memory", "share", "cache", "intrinsic", "many objects"],
    example=_code('''
        class Glyph:
            def __init__(self, char, font):
                self.char = char
                self.font = font

            def draw(self, x, y):
                return f"{self.char}@({x},{y}) in {self.font}"


        class GlyphFactory:
            _pool = {}

            @classmethod
            def get(cls, char, font):
                key = (char, font)
                if key not in cls._pool:
                    cls._pool[key] = Glyph(char, font)
                return cls._pool[key]


        text = "banana"
        glyphs = [GlyphFactory.get(c, "Mono") for c in text]

        for x, glyph in enumerate(glyphs):
            glyph.draw(x, 0)

        print(len(glyphs))               # 6
        print(len(GlyphFactory._pool))   # 3
    '''),
)


PROXY_PATTERN = PatternEntry(
    name="Proxy",
    description="Provide a surrogate or placeholder for another object to control access to it.",
    category=PatternCategory.STRUCTURAL,
    when_to_use=[
        "Lazy loading of an expensive object (virtual proxy).",
        "Access control or permission checks before reaching the real object.",
        "Caching, logging or remote access around an existing interface.",
    ],
    when_not_to_use=[
        "The real object is cheap and needs no access control.",
        "Extra latency from the indirection is unacceptable.",
    ],
    pros=[
        "Controls the real object without clients knowing.",
        "Can defer creation until it is needed.",
    ],
    cons=[
        "Adds a layer of indirection.",
        "Responses may be delayed or stale.",
    ],
    tags=["proxy", "surrogate", "lazy", "access control", "placeholder", "permission"],
    example=_code('''
        class Image:
            def __init__(self, path):
                self.path = path
                print(f"loading {path}")

            def show(self):
                return f"showing {self.path}"


        class ImageProxy:
            def __init__(self, path):
                self.path = path
                self._image = None

            def show(self):
                if self._image is None:
                    self._image = Image(self.path)
                return self._image.show()


        gallery = [ImageProxy("a.png"), ImageProxy("b.png")]
        print("gallery ready")
        print(gallery[0].show())
        # gallery ready
        # loading a.png
        # showing a.png
    '''),
)


# ============================================================
# BEHAVIORAL PATTERNS (part 2)
# ============================================================

CHAIN_OF_RESPONSIBILITY_PATTERN = PatternEntry(
    name="Chain of Responsibility",
    description="Pass a request along a chain of handlers; each handler either processes the request or forwards it to the next.",
    category=PatternCategory.BEHAVIORAL,
    when_to_use=[
        "More than one object may handle a request and the handler is not known in advance.",
        "The set of handlers and their order should be configurable.",
        "Request pipelines such as middleware, validation or approval steps.",
    ],
    when_not_to_use=[
        "Every request must be handled; a chain can drop requests silently.",
        "There is a single obvious handler.",
    ],
    pros=[
        "Decouples senders from receivers.",
        "Handlers can be added, removed or reordered freely.",
    ],
    cons=[
        "No guarantee a request is handled.",
        "Long chains are hard to debug.",
    ],
    tags=["chain", "handler", "middleware", "pipeline", "approval", "forward request"],
    example=_code('''
        class Handler:
            def __init__(self, successor=None):
                self.successor = successor

            def handle(self, amount):
                if self.successor is None:
                    raise ValueError(f"nobody can approve {amount}")
                return self.successor.handle(amount)


        class TeamLead(Handler):
            def handle(self, amount):
                if amount <= 1_000:
                    return "approved by team lead"
                return super().handle(amount)


        class Director(Handler):
            def handle(self, amount):
                if amount <= 10_000:
                    return "approved by director"
                return super().handle(amount)


        chain = TeamLead(Director())
        print(chain.handle(500))     # approved by team lead
        print(chain.handle(5_000))   # approved by director
        chain.handle(50_000)         # ValueError: nobody can approve 50000
    '''),
)


COMMAND_PATTERN = PatternEntry(
    name="Command",
    description="Encapsulate a request as an object, so requests can be queued, logged, and undone.",
    category=PatternCategory.BEHAVIORAL,
    when_to_use=[
        "Operations need undo and redo support.",
        "Requests must be queued, scheduled or logged for replay.",
        "Menu items, buttons and shortcuts should trigger the same action objects.",
    ],
    when_not_to_use=[
        "Actions are simple direct calls with no history requirements.",
        "A plain function reference already covers the need.",
    ],
    pros=[
        "Decouples the invoker from the receiver.",
        "Enables undo, redo, macros and deferred execution.",
    ],
    cons=[
        "One class per action increases code volume.",
        "Undo logic must be kept in sync with execute logic.",
    ],
    tags=["command", "undo", "redo", "queue", "action", "history"],
    example=_code('''
        class Document:
            def __init__(self):
                self.text = ""


        class AppendCommand:
            def __init__(self, document, text):
                self.document = document
                self.text = text

            def execute(self):
                self.document.text += self.text

            def undo(self):
                self.document.text = self.document.text[: -len(self.text)]


        class Editor:
            def __init__(self):
                self.history = []

            def run(self, command):
                command.execute()
                self.history.append(command)

            def undo(self):
                if self.history:
                    self.history.pop().undo()


        doc = Document()
        editor = Editor()
        editor.run(AppendCommand(doc, "Hello"))
        editor.run(AppendCommand(doc, ", world"))
        editor.undo()
        print(doc.text)   # Hello
    '''),
)


ITERATOR_PATTERN = PatternEntry(
    name="Iterator",
    description="Provide a way to access the elements of a collection sequentially without exposing its underlying representation.",
    category=PatternCategory.BEHAVIORAL,
    when_to_use=[
        "A collection has a complex internal structure that clients should not see.",
        "Several traversal orders are needed over the same collection.",
        "Elements should be produced lazily, one at a time.",
    ],
    when_not_to_use=[
        "The collection is a simple list that is already iterable.",
        "Random access by index is the main way the data is used.",
    ],
    pros=[
        "Uniform traversal interface across collections.",
        "Traversal state lives outside the collection.",
        "Supports lazy, memory-friendly sequences.",
    ],
    cons=[
        "Overkill for simple collections.",
        "Modifying a collection during iteration needs care.",
    ],
    tags=["iterator", "traversal", "sequence", "collection", "lazy", "generator"],
    example=_code('''
        class Playlist:
            def __init__(self):
                self._songs = []

            def add(self, title):
                self._songs.append(title)

            def __iter__(self):
                return PlaylistIterator(self._songs)


        class PlaylistIterator:
            def __init__(self, songs):
                self._songs = songs
                self._index = 0

            def __iter__(self):
                return self

            def __next__(self):
                if self._index >= len(self._songs):
                    raise StopIteration
                song = self._songs[self._index]
                self._index += 1
                return song


        playlist = Playlist()
        playlist.add("Intro")
        playlist.add("Outro")
        for song in playlist:
            print(song)
        # Intro
        # Outro
    '''),
)


STATE_PATTERN = PatternEntry(
    name="State",
    description="Allow an object to alter its behavior when its internal state changes; the object appears to change its class.",
    category=PatternCategory.BEHAVIORAL,
    when_to_use=[
        "Behavior depends on the current state and changes at runtime.",
        "Large conditionals switch on a state field in many methods.",
        "State transitions follow clear, well-defined rules.",
    ],
    when_not_to_use=[
        "There are only a couple of states with trivial behavior.",
        "States rarely change, so conditionals stay readable.",
    ],
    pros=[
        "Each state's behavior lives in its own class.",
        "Transitions are explicit.",
        "New states can be added without touching existing ones.",
    ],
    cons=[
        "More classes for simple machines.",
        "Transition logic can spread across state classes.",
    ],
    tags=["state", "state machine", "transition", "workflow", "lifecycle"],
    example=_code('''
        class Draft:
            def publish(self, doc):
                doc.state = Review()
                return "sent to review"


        class Review:
            def publish(self, doc):
                doc.state = Published()
                return "published"


        class Published:
            def publish(self, doc):
                return "already published"


        class Article:
            def __init__(self):
                self.state = Draft()

            def publish(self):
                return self.state.publish(self)


        article = Article()
        print(article.publish())   # sent to review
        print(article.publish())   # published
        print(article.publish())   # already published
    '''),
)


# ============================================================
# CATALOG AGGREGATION
# ============================================================

PATTERN_CATALOG = [
    SINGLETON_PATTERN,
    FACTORY_PATTERN,
    OBSERVER_PATTERN,
    STRATEGY_PATTERN,
    DECORATOR_PATTERN,
    ADAPTER_PATTERN,
    BRIDGE_PATTERN,
    COMPOSITE_PATTERN,
    FACADE_PATTERN,
    FLYWEIGHT_PATTERN,
    PROXY_PATTERN,
    CHAIN_OF_RESPONSIBILITY_PATTERN,
    COMMAND_PATTERN,
    ITERATOR_PATTERN,
    STATE_PATTERN,
]


def register_all_patterns(registry: PatternRegistry) -> None:
    """Register all patterns from the catalog"""
    for entry in PATTERN_CATALOG:
        registry.register(entry)
    debug("CATALOG", f"registered {len(registry)} built-in patterns")
