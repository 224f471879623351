"""
Redux boilerplate generator — demo slice, store factory, provider.

Pure: returns ``GeneratedFile`` instances, writes nothing. The files
always replace whatever is on disk at the same paths.
"""

from __future__ import annotations

from redux_scaffold.core.models.template import GeneratedFile

SLICE_PATH = "src/app/redux/features/demo/demoSlice.js"
STORE_PATH = "src/app/redux/store.js"
PROVIDER_PATH = "src/app/redux/provider.jsx"


_SLICE_TEMPLATE = """\
import { createSlice } from "@reduxjs/toolkit";

const demoSlice = createSlice({
  name: "demo",
  initialState: {
    value: 0,
  },
  reducers: {
    increment: (state) => {
      state.value += 1;
    },
    decrement: (state) => {
      state.value -= 1;
    },
  },
});

export const { increment, decrement } = demoSlice.actions;

export default demoSlice.reducer;
"""

_STORE_TEMPLATE = """\
import { configureStore } from "@reduxjs/toolkit";
import demoReducer from "./features/demo/demoSlice";

export const store = () => {
  return configureStore({
    reducer: {
      demo: demoReducer,
    },
  });
};
"""

_PROVIDER_TEMPLATE = """\
"use client";

import { useRef } from "react";
import { Provider } from "react-redux";
import { store } from "./store";

// One store per client session; created on first render.
export function ReduxProvider({ children }) {
  const storeRef = useRef(null);

  if (!storeRef.current) {
    storeRef.current = typeof store === "function" ? store() : store;
  }

  return <Provider store={storeRef.current}>{children}</Provider>;
}

// Older import names, same component
export const SimpleReduxProvider = ReduxProvider;
export const OptimizedReduxProvider = ReduxProvider;

export default OptimizedReduxProvider;
"""


def generate_slice() -> GeneratedFile:
    return GeneratedFile(
        path=SLICE_PATH,
        content=_SLICE_TEMPLATE,
        reason="Demo slice with increment/decrement reducers",
    )


def generate_store() -> GeneratedFile:
    return GeneratedFile(
        path=STORE_PATH,
        content=_STORE_TEMPLATE,
        reason="Store factory combining slice reducers",
    )


def generate_provider() -> GeneratedFile:
    return GeneratedFile(
        path=PROVIDER_PATH,
        content=_PROVIDER_TEMPLATE,
        reason="Client component exposing the store to the app tree",
    )


def generate_redux_files() -> list[GeneratedFile]:
    """All Redux boilerplate files, in write order (slice, store, provider)."""
    return [generate_slice(), generate_store(), generate_provider()]
