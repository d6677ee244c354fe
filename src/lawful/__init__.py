"""Composable computation abstractions and the data types built on them."""

# ruff: noqa: F401

from lawful.applicative import Applicative
from lawful.errors import DoNotationError, MissingInstanceError
from lawful.foldable import Foldable, fold_right_sequence
from lawful.free import Bind, Free, FreeMonad, Return, free_monad, lift_f
from lawful.functor import ContravariantFunctor, Functor
from lawful.identity import IdMonad, id_monad, identity_transformation
from lawful.instances import Instances
from lawful.kleisli import Kleisli, KleisliMonad, ask, reader, reader_monad
from lawful.monad import Done, Loop, Monad
from lawful.natural import NaturalTransformation, natural
from lawful.semigroup import Monoid, Semigroup
from lawful.state import State, StateMonad, state_monad
from lawful.syntax import do
from lawful.transformers import ListT, ListTMonad, OptionT, OptionTMonad, Some
from lawful.traverse import Traverse, traverse_sequence
from lawful.validation import CLeft, CRight, CValidation, ValidationMonad
from lawful.writer import Writer, WriterMonad, tell, writer
