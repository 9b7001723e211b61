"""Placeholder Vue component paired with a generated test file."""


def container_test_id(name: str) -> str:
    """The data-testid carried by the stub's root element."""
    return f"{name.lower()}-container"


def render_component_stub(name: str) -> str:
    """Render a minimal single-file component for ``name``."""
    return f"""<template>
  <div data-testid="{container_test_id(name)}">
    <!-- TODO: Implement component to pass tests -->
    <h2>{name} Component</h2>
    <p>Implementation pending - write tests first!</p>
  </div>
</template>

<script setup lang="ts">
// import {{ ref, computed, watch }} from 'vue'

// TODO: Define props based on test requirements
// const props = defineProps<{{}}>()

// TODO: Define emitted events based on test requirements
// const emit = defineEmits<{{}}>()
</script>

<style scoped>
/* TODO: Add styles */
</style>
"""
